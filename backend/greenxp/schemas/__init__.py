# backend/greenxp/schemas/__init__.py

# Missions
from .mission import (
    MissionCreate,
    MissionUpdate,
    MissionOut,
    MissionProgressOut,
)

# Acceptance records
from .user_mission import (
    UserMissionCreate,
    UserMissionUpdate,
)

# Users
from .user import (
    UserCreate,
    UserOut,
    SummaryCounts,
    UserSummary,
)

__all__ = [
    "MissionCreate", "MissionUpdate", "MissionOut", "MissionProgressOut",
    "UserMissionCreate", "UserMissionUpdate",
    "UserCreate", "UserOut", "SummaryCounts", "UserSummary",
]
