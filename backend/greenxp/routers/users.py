# backend/greenxp/routers/users.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from greenxp.db import get_db
from greenxp.models.user import User
from greenxp import queries
from greenxp.schemas.user import UserCreate, UserOut, SummaryCounts, UserSummary

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    user = User(username=payload.username, email=payload.email, role=payload.role)
    db.add(user)
    db.commit()
    db.refresh(user)
    return {"id": user.id}


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db)):
    return db.scalars(select(User).order_by(User.id)).all()


@router.get("/{user_id}/summary", response_model=UserSummary)
def user_summary(user_id: int, db: Session = Depends(get_db)):
    """
    XP earned plus how the catalog splits for this user.
    Each figure is its own query; under concurrent writes they may disagree slightly.
    """
    return UserSummary(
        total_xp=queries.total_xp(db, user_id),
        counts=SummaryCounts(
            public=queries.count_public(db, user_id),
            accepted=queries.count_progress(db, user_id, completed=False),
            completed=queries.count_progress(db, user_id, completed=True),
        ),
    )
