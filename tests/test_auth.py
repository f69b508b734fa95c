from datetime import timedelta

from sqlalchemy import func, select, update

from app.db.base import async_session_factory
from app.domain.mixins import utcnow
from app.domain.user import UserSession

API = "/api/v1"


async def test_health(anon):
    response = await anon.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_register_creates_org_and_signs_in(anon, register_org):
    data = await register_org(anon, "Acme Recycling, Inc.", "Owner@Acme.test")

    assert data["user"]["email"] == "owner@acme.test"
    assert data["user"]["organizationRole"] == "owner"
    assert data["organization"]["slug"] == "acme-recycling-inc"
    assert data["organization"]["billingEmail"] == "Owner@Acme.test"
    assert anon.cookies.get("session_token")

    me = await anon.get(f"{API}/auth/me")
    assert me.status_code == 200
    assert me.json()["data"]["id"] == data["user"]["id"]


async def test_duplicate_org_names_get_distinct_slugs(anon, register_org):
    first = await register_org(anon, "Acme", "a@acme.test")
    second = await register_org(anon, "Acme", "b@acme.test")
    assert first["organization"]["slug"] == "acme"
    assert second["organization"]["slug"] == "acme-2"


async def test_duplicate_email_is_conflict(client):
    response = await client.post(
        f"{API}/auth/register",
        json={"organizationName": "Other", "email": "OWNER@acme.test", "password": "longenough"},
    )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_requests_without_credentials_are_rejected(anon):
    response = await anon.get(f"{API}/vendors")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"


async def test_login_and_logout(client, anon):
    bad = await anon.post(
        f"{API}/auth/login", json={"email": "owner@acme.test", "password": "wrong-password"}
    )
    assert bad.status_code == 401
    assert bad.json()["error"]["message"] == "Invalid email or password"

    good = await anon.post(
        f"{API}/auth/login", json={"email": "owner@acme.test", "password": "correct-horse-battery"}
    )
    assert good.status_code == 200
    assert good.json()["data"]["lastLogin"] is not None
    assert (await anon.get(f"{API}/auth/me")).status_code == 200

    out = await anon.post(f"{API}/auth/logout")
    assert out.json() == {"message": "Logout successful"}
    assert (await anon.get(f"{API}/auth/me")).status_code == 401


async def test_stale_session_cookie_is_rejected(anon):
    anon.cookies.set("session_token", "not-a-real-session")
    response = await anon.get(f"{API}/auth/me")
    assert response.status_code == 401


async def test_update_profile(client):
    response = await client.patch(
        f"{API}/auth/me", json={"jobTitle": "Sustainability Lead", "onboardingCompleted": True}
    )
    assert response.status_code == 200
    body = response.json()["data"]
    assert body["jobTitle"] == "Sustainability Lead"
    assert body["onboardingCompleted"] is True
    assert body["firstName"] == "Test"


async def test_short_password_is_rejected(anon):
    response = await anon.post(
        f"{API}/auth/register",
        json={"organizationName": "Tiny", "email": "t@tiny.test", "password": "short"},
    )
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def _expire_sessions() -> None:
    async with async_session_factory() as session:
        await session.execute(update(UserSession).values(expires_at=utcnow() - timedelta(minutes=1)))
        await session.commit()


async def _session_count() -> int:
    async with async_session_factory() as session:
        return (await session.execute(select(func.count()).select_from(UserSession))).scalar_one()


async def test_expired_session_is_rejected(client):
    assert (await client.get(f"{API}/auth/me")).status_code == 200
    await _expire_sessions()
    response = await client.get(f"{API}/auth/me")
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Session expired"


async def test_login_purges_expired_sessions(client, anon):
    await _expire_sessions()
    assert await _session_count() == 1

    login = await anon.post(
        f"{API}/auth/login", json={"email": "owner@acme.test", "password": "correct-horse-battery"}
    )
    assert login.status_code == 200
    assert await _session_count() == 1
    assert (await anon.get(f"{API}/auth/me")).status_code == 200
