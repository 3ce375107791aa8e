import os

# must be set before greenxp.config is imported
os.environ.setdefault("GREENXP_DATABASE_URL", "sqlite://")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from greenxp.db import Base, get_db
from greenxp import models  # noqa: F401
from greenxp.main import build_app

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def db_engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def app(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app = build_app()
    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user(client):
    async def create_user(username="player", role="user") -> int:
        resp = await client.post("/users", json={
            "username": username,
            "email": f"{username}@example.com",
            "role": role,
        })
        assert resp.status_code == 201
        return resp.json()["id"]
    return create_user


@pytest_asyncio.fixture
async def admin_headers(make_user):
    admin_id = await make_user("admin", role="admin")
    return {"x-user-id": str(admin_id)}


@pytest_asyncio.fixture
async def user_id(make_user):
    return await make_user("player")
