# backend/greenxp/schemas/mission.py
from typing import Optional
from pydantic import BaseModel
from pydantic.config import ConfigDict

class MissionCreate(BaseModel):
    # title is checked by the route so a missing one answers "title required"
    title: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    xp: Optional[int] = None

class MissionUpdate(BaseModel):
    title: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[str] = None
    xp: Optional[int] = None

class MissionOut(BaseModel):
    id: int
    title: str
    category: Optional[str] = None
    difficulty: str
    xp: int

    model_config = ConfigDict(from_attributes=True)

class MissionProgressOut(MissionOut):
    """A mission as seen through one of the user's acceptance rows."""
    user_mission_id: int
