# backend/greenxp/models/user.py
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from greenxp.db import Base

USER_ROLE = "user"
ADMIN_ROLE = "admin"
ROLES = (USER_ROLE, ADMIN_ROLE)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=USER_ROLE, server_default=USER_ROLE)

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE
