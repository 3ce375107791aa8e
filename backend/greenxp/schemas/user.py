# backend/greenxp/schemas/user.py
from pydantic import BaseModel, field_validator
from pydantic.config import ConfigDict

from greenxp.models.user import ROLES, USER_ROLE

class UserCreate(BaseModel):
    username: str
    email: str
    role: str = USER_ROLE

    @field_validator("role")
    @classmethod
    def _known_role(cls, v: str) -> str:
        if v not in ROLES:
            raise ValueError(f"role must be one of {', '.join(ROLES)}")
        return v

class UserOut(BaseModel):
    id: int
    username: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)

class SummaryCounts(BaseModel):
    public: int = 0
    accepted: int = 0
    completed: int = 0

class UserSummary(BaseModel):
    total_xp: int = 0
    counts: SummaryCounts
