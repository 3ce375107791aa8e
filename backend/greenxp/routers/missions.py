# backend/greenxp/routers/missions.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from greenxp.auth import require_admin
from greenxp.db import get_db
from greenxp.errors import NotFoundError, ValidationError
from greenxp.models.mission import Mission
from greenxp import queries
from greenxp.schemas.mission import MissionCreate, MissionUpdate, MissionOut, MissionProgressOut
from greenxp.xp import DEFAULT_DIFFICULTY, resolve_xp

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/missions", tags=["missions"])

# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------
def _clean_title(title: str | None) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("title required")
    return title


def _progress_out(rows) -> list[MissionProgressOut]:
    return [
        MissionProgressOut(user_mission_id=um_id, **MissionOut.model_validate(m).model_dump())
        for um_id, m in rows
    ]

# ----------------------------------------------------------------------
# Catalog
# ----------------------------------------------------------------------
@router.get("", response_model=List[MissionOut])
def list_missions(db: Session = Depends(get_db)):
    """List all missions, oldest first."""
    return db.scalars(select(Mission).order_by(Mission.id)).all()


@router.post("", status_code=201, dependencies=[Depends(require_admin)])
def create_mission(payload: MissionCreate, db: Session = Depends(get_db)):
    """Create a mission. A known difficulty fixes the xp; otherwise the given xp is kept."""
    title = _clean_title(payload.title)
    mission = Mission(
        title=title,
        category=payload.category or None,
        difficulty=payload.difficulty or DEFAULT_DIFFICULTY,
        xp=resolve_xp(payload.difficulty, payload.xp),
    )
    db.add(mission)
    db.commit()
    db.refresh(mission)
    logger.info("mission %s created (%s, %s xp)", mission.id, mission.difficulty, mission.xp)
    return {"message": f'Mission "{title}" added.', "id": mission.id}


@router.put("/{mission_id}", dependencies=[Depends(require_admin)])
def update_mission(mission_id: int, payload: MissionUpdate, db: Session = Depends(get_db)):
    """Partial update; a new difficulty recomputes xp.

    A null difficulty or xp counts as not given, so a body of only
    `{"xp": null}` is rejected with "No fields to update" rather than
    resetting xp to 0.
    """
    given = payload.model_dump(exclude_unset=True)
    values = {}

    if "title" in given:
        values["title"] = _clean_title(given["title"])
    if "category" in given:
        values["category"] = given["category"] or None
    if given.get("difficulty") is not None:
        values["difficulty"] = given["difficulty"]
        values["xp"] = resolve_xp(given["difficulty"], given.get("xp"))
    elif given.get("xp") is not None:
        values["xp"] = given["xp"]

    if not values:
        raise ValidationError("No fields to update")

    res = db.execute(update(Mission).where(Mission.id == mission_id).values(**values))
    if res.rowcount == 0:
        db.rollback()
        raise NotFoundError("Mission not found")
    db.commit()
    return {"message": f"Mission {mission_id} updated."}


@router.delete("/{mission_id}", dependencies=[Depends(require_admin)])
def delete_mission(mission_id: int, db: Session = Depends(get_db)):
    """Delete a mission. Acceptance rows pointing at it are left in place."""
    res = db.execute(delete(Mission).where(Mission.id == mission_id))
    if res.rowcount == 0:
        db.rollback()
        raise NotFoundError("Mission not found")
    db.commit()
    logger.info("mission %s deleted", mission_id)
    return {"message": f"Mission {mission_id} deleted."}

# ----------------------------------------------------------------------
# Per-user views
# ----------------------------------------------------------------------
@router.get("/public/{user_id}", response_model=List[MissionOut])
def list_public_missions(user_id: int, db: Session = Depends(get_db)):
    """Missions the user has not accepted yet."""
    return queries.public_missions(db, user_id)


@router.get("/accepted/{user_id}", response_model=List[MissionProgressOut])
def list_accepted_missions(user_id: int, db: Session = Depends(get_db)):
    return _progress_out(queries.progress_missions(db, user_id, completed=False))


@router.get("/completed/{user_id}", response_model=List[MissionProgressOut])
def list_completed_missions(user_id: int, db: Session = Depends(get_db)):
    return _progress_out(queries.progress_missions(db, user_id, completed=True))
