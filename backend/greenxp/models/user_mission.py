# backend/greenxp/models/user_mission.py
from sqlalchemy import Boolean, Integer, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column
from greenxp.db import Base

class UserMission(Base):
    """A user's acceptance of a mission; ``completed`` flips once it is done."""
    __tablename__ = "user_missions"
    __table_args__ = (
        UniqueConstraint("user_id", "mission_id", name="uq_user_missions_user_mission"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # plain ids, no foreign keys: deleting a mission leaves its acceptance rows behind
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    mission_id: Mapped[int] = mapped_column(Integer, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
