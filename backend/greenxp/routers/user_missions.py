# backend/greenxp/routers/user_missions.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from greenxp.db import get_db
from greenxp.errors import ConflictError, ValidationError
from greenxp.models.user_mission import UserMission
from greenxp.schemas.user_mission import UserMissionCreate, UserMissionUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user_missions", tags=["user_missions"])

ALREADY_ACCEPTED = "Mission already accepted by this user"


def _existing(db: Session, user_id: int, mission_id: int) -> int | None:
    return db.scalar(
        select(UserMission.id).where(
            UserMission.user_id == user_id,
            UserMission.mission_id == mission_id,
        )
    )


@router.post("", status_code=201)
def accept_mission(payload: UserMissionCreate, db: Session = Depends(get_db)):
    """Accept a mission for a user; each (user, mission) pair at most once."""
    if not payload.user_id or not payload.mission_id:
        raise ValidationError("user_id and mission_id required")

    if _existing(db, payload.user_id, payload.mission_id) is not None:
        raise ConflictError(ALREADY_ACCEPTED)

    um = UserMission(user_id=payload.user_id, mission_id=payload.mission_id)
    db.add(um)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # a concurrent request inserted the same pair between check and insert
        if _existing(db, payload.user_id, payload.mission_id) is not None:
            raise ConflictError(ALREADY_ACCEPTED)
        raise
    db.refresh(um)
    logger.info("user %s accepted mission %s", um.user_id, um.mission_id)
    return {"message": "Mission accepted!", "id": um.id}


@router.put("/{user_mission_id}")
def set_completed(user_mission_id: int, payload: UserMissionUpdate, db: Session = Depends(get_db)):
    """Set or clear the completed flag. Unknown ids are a no-op."""
    res = db.execute(
        update(UserMission)
        .where(UserMission.id == user_mission_id)
        .values(completed=bool(payload.completed))
    )
    db.commit()
    if res.rowcount == 0:
        logger.debug("user mission %s not found; nothing updated", user_mission_id)
    return {"message": f"User mission {user_mission_id} updated."}


@router.delete("/{user_mission_id}")
def abandon_mission(user_mission_id: int, db: Session = Depends(get_db)):
    db.execute(delete(UserMission).where(UserMission.id == user_mission_id))
    db.commit()
    return {"message": f"User mission {user_mission_id} removed."}
