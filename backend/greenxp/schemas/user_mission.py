# backend/greenxp/schemas/user_mission.py
from typing import Any, Optional
from pydantic import BaseModel

class UserMissionCreate(BaseModel):
    user_id: Optional[int] = None
    mission_id: Optional[int] = None

class UserMissionUpdate(BaseModel):
    # any JSON value; the route stores its truthiness (2 -> completed, 0/null/missing -> not)
    completed: Any = None
