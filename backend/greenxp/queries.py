# backend/greenxp/queries.py
"""
Data-access helpers shared by the mission lists and the user summary.

A mission sits in exactly one partition per user: public (no acceptance
row), accepted (row with completed = false) or completed.
"""
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from greenxp.models.mission import Mission
from greenxp.models.user_mission import UserMission


def _accepted_mission_ids(user_id: int) -> Select:
    return select(UserMission.mission_id).where(UserMission.user_id == user_id)


def _progress_filter(stmt: Select, user_id: int, completed: bool) -> Select:
    return (
        stmt.join_from(UserMission, Mission, Mission.id == UserMission.mission_id)
        .where(UserMission.user_id == user_id, UserMission.completed == completed)
    )


def public_missions(db: Session, user_id: int) -> list[Mission]:
    stmt = select(Mission).where(Mission.id.not_in(_accepted_mission_ids(user_id))).order_by(Mission.id)
    return list(db.scalars(stmt).all())


def progress_missions(db: Session, user_id: int, completed: bool) -> list[tuple[int, Mission]]:
    """(user_mission_id, mission) pairs for the user's accepted or completed missions."""
    stmt = _progress_filter(select(UserMission.id, Mission), user_id, completed).order_by(UserMission.id)
    return [(um_id, mission) for um_id, mission in db.execute(stmt).all()]


def total_xp(db: Session, user_id: int) -> int:
    stmt = _progress_filter(
        select(func.coalesce(func.sum(Mission.xp), 0)), user_id, True
    )
    return int(db.scalar(stmt) or 0)


def count_public(db: Session, user_id: int) -> int:
    stmt = select(func.count()).select_from(Mission).where(Mission.id.not_in(_accepted_mission_ids(user_id)))
    return int(db.scalar(stmt) or 0)


def count_progress(db: Session, user_id: int, completed: bool) -> int:
    stmt = _progress_filter(select(func.count()), user_id, completed)
    return int(db.scalar(stmt) or 0)
