# backend/greenxp/db.py
import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session

from greenxp.config import settings

logger = logging.getLogger(__name__)


# --- SQLAlchemy Base ---------------------------------------------------------
class Base(DeclarativeBase):
    pass


# --- Engine / Session --------------------------------------------------------
DATABASE_URL = settings.database_url


def _engine_options(url: str) -> dict:
    if make_url(url).get_backend_name() == "sqlite":
        # request handlers run in a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_size": settings.DB_POOL_SIZE, "max_overflow": 0}


# pool_pre_ping avoids "stale" connections on container restarts
engine = create_engine(DATABASE_URL, pool_pre_ping=True, future=True, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    future=True,
)


# FastAPI dependency: one pooled session per request, released on every exit path
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def healthcheck() -> dict:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return {"status": "ok"}


def init_db() -> None:
    """Create all tables. Development only; deployments run the Alembic migrations."""
    import greenxp.models  # noqa: F401  registers tables on Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Created tables on %s", engine.url.render_as_string(hide_password=True))
