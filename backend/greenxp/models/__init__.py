# backend/greenxp/models/__init__.py
from greenxp.db import Base

# import all model modules so tables get registered on Base.metadata
from .user import User
from .mission import Mission
from .user_mission import UserMission


__all__ = [
    "Base",
    "User",
    "Mission",
    "UserMission",
]
