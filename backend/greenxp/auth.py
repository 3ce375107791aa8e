# backend/greenxp/auth.py
"""
Admin gate for the mission-management routes.

The check is a strategy object so deployments can plug in a different
credential source; the role lookup below is the one wired in by default.
"""
import logging

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from greenxp.db import get_db
from greenxp.errors import AuthError, Forbidden, NotFoundError
from greenxp.models.user import User

logger = logging.getLogger(__name__)

USER_ID_HEADER = "x-user-id"


class AdminAuthStrategy:
    """Decides whether a request may manage the mission catalog."""

    def authorize(self, request: Request, db: Session) -> User:
        raise NotImplementedError


class RoleLookupAdmin(AdminAuthStrategy):
    """Trust the ``x-user-id`` header only as far as the ``users.role`` column allows."""

    header = USER_ID_HEADER

    def authorize(self, request: Request, db: Session) -> User:
        raw = request.headers.get(self.header)
        if not raw:
            raise AuthError(f"Missing {self.header} header")
        try:
            user_id = int(raw)
        except ValueError:
            raise NotFoundError("User not found") from None

        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        if not user.is_admin:
            logger.info("user %s denied on %s %s", user_id, request.method, request.url.path)
            raise Forbidden("Admin only route")
        return user


_strategy: AdminAuthStrategy = RoleLookupAdmin()


def get_admin_strategy() -> AdminAuthStrategy:
    return _strategy


# FastAPI dependency
def require_admin(
    request: Request,
    db: Session = Depends(get_db),
    strategy: AdminAuthStrategy = Depends(get_admin_strategy),
) -> User:
    return strategy.authorize(request, db)
