# backend/greenxp/models/mission.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from greenxp.db import Base
from greenxp.xp import DEFAULT_DIFFICULTY

class Mission(Base):
    __tablename__ = "missions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    # free-form; only easy/medium/hard map to a fixed xp
    difficulty: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_DIFFICULTY, server_default=DEFAULT_DIFFICULTY)
    xp: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
