import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from greenxp.models import UserMission
from greenxp.routers import user_missions as user_missions_router


@pytest_asyncio.fixture
async def mission_id(client, admin_headers):
    resp = await client.post("/missions", json={"title": "Plant a tree", "difficulty": "medium"}, headers=admin_headers)
    return resp.json()["id"]


async def _accept(client, user_id, mission_id):
    return await client.post("/user_missions", json={"user_id": user_id, "mission_id": mission_id})


@pytest.mark.asyncio
async def test_accept_mission(client, user_id, mission_id):
    resp = await _accept(client, user_id, mission_id)
    assert resp.status_code == 201
    data = resp.json()
    assert data["message"] == "Mission accepted!"
    assert isinstance(data["id"], int)


@pytest.mark.asyncio
async def test_accept_requires_ids(client, user_id, mission_id):
    for body in ({}, {"user_id": user_id}, {"mission_id": mission_id}, {"user_id": 0, "mission_id": mission_id}):
        resp = await client.post("/user_missions", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "user_id and mission_id required"}


@pytest.mark.asyncio
async def test_accept_twice_conflicts(client, session_factory, user_id, mission_id):
    assert (await _accept(client, user_id, mission_id)).status_code == 201
    resp = await _accept(client, user_id, mission_id)
    assert resp.status_code == 409
    assert resp.json() == {"error": "Mission already accepted by this user"}

    with session_factory() as s:
        rows = s.scalar(
            select(func.count()).select_from(UserMission).where(
                UserMission.user_id == user_id, UserMission.mission_id == mission_id
            )
        )
    assert rows == 1


@pytest.mark.asyncio
async def test_same_mission_for_different_users(client, make_user, user_id, mission_id):
    other = await make_user("other")
    assert (await _accept(client, user_id, mission_id)).status_code == 201
    assert (await _accept(client, other, mission_id)).status_code == 201


def test_pair_is_unique_in_storage(session_factory):
    with session_factory() as s:
        s.add(UserMission(user_id=1, mission_id=1))
        s.commit()
        s.add(UserMission(user_id=1, mission_id=1))
        with pytest.raises(IntegrityError):
            s.commit()


@pytest.mark.asyncio
async def test_complete_and_reopen(client, user_id, mission_id):
    um_id = (await _accept(client, user_id, mission_id)).json()["id"]

    resp = await client.put(f"/user_missions/{um_id}", json={"completed": True})
    assert resp.status_code == 200
    assert resp.json() == {"message": f"User mission {um_id} updated."}
    completed = (await client.get(f"/missions/completed/{user_id}")).json()
    assert [m["user_mission_id"] for m in completed] == [um_id]
    assert (await client.get(f"/missions/accepted/{user_id}")).json() == []

    await client.put(f"/user_missions/{um_id}", json={"completed": False})
    accepted = (await client.get(f"/missions/accepted/{user_id}")).json()
    assert [m["id"] for m in accepted] == [mission_id]
    assert (await client.get(f"/missions/completed/{user_id}")).json() == []


@pytest.mark.asyncio
async def test_missing_completed_flag_means_not_completed(client, user_id, mission_id):
    um_id = (await _accept(client, user_id, mission_id)).json()["id"]
    await client.put(f"/user_missions/{um_id}", json={"completed": True})
    await client.put(f"/user_missions/{um_id}", json={})
    assert len((await client.get(f"/missions/accepted/{user_id}")).json()) == 1


@pytest.mark.asyncio
async def test_update_unknown_user_mission_is_noop(client):
    resp = await client.put("/user_missions/4242", json={"completed": True})
    assert resp.status_code == 200
    assert resp.json() == {"message": "User mission 4242 updated."}


@pytest.mark.asyncio
async def test_abandon(client, user_id, mission_id):
    um_id = (await _accept(client, user_id, mission_id)).json()["id"]
    resp = await client.delete(f"/user_missions/{um_id}")
    assert resp.status_code == 200
    assert resp.json() == {"message": f"User mission {um_id} removed."}

    public = (await client.get(f"/missions/public/{user_id}")).json()
    assert [m["id"] for m in public] == [mission_id]
    # can be accepted again once abandoned
    assert (await _accept(client, user_id, mission_id)).status_code == 201


@pytest.mark.asyncio
async def test_abandon_unknown_is_noop(client):
    resp = await client.delete("/user_missions/4242")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_accepted_rows_carry_mission_fields(client, user_id, mission_id):
    um_id = (await _accept(client, user_id, mission_id)).json()["id"]
    rows = (await client.get(f"/missions/accepted/{user_id}")).json()
    assert rows == [{
        "id": mission_id,
        "title": "Plant a tree",
        "category": None,
        "difficulty": "medium",
        "xp": 25,
        "user_mission_id": um_id,
    }]


@pytest.mark.asyncio
async def test_insert_race_reported_as_conflict(client, session_factory, monkeypatch, user_id, mission_id):
    assert (await _accept(client, user_id, mission_id)).status_code == 201

    real_existing = user_missions_router._existing
    calls = []

    def stale_then_real(db, uid, mid):
        calls.append((uid, mid))
        if len(calls) == 1:
            # the other request commits right after this check
            return None
        return real_existing(db, uid, mid)

    monkeypatch.setattr(user_missions_router, "_existing", stale_then_real)
    resp = await _accept(client, user_id, mission_id)
    assert resp.status_code == 409
    assert resp.json() == {"error": "Mission already accepted by this user"}
    assert len(calls) == 2

    with session_factory() as s:
        rows = s.scalar(
            select(func.count()).select_from(UserMission).where(
                UserMission.user_id == user_id, UserMission.mission_id == mission_id
            )
        )
    assert rows == 1


@pytest.mark.asyncio
async def test_completed_takes_truthiness(client, user_id, mission_id):
    um_id = (await _accept(client, user_id, mission_id)).json()["id"]

    resp = await client.put(f"/user_missions/{um_id}", json={"completed": 2})
    assert resp.status_code == 200
    assert [m["user_mission_id"] for m in (await client.get(f"/missions/completed/{user_id}")).json()] == [um_id]

    await client.put(f"/user_missions/{um_id}", json={"completed": 0})
    assert (await client.get(f"/missions/completed/{user_id}")).json() == []
    assert len((await client.get(f"/missions/accepted/{user_id}")).json()) == 1
