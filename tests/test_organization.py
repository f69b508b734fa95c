API = "/api/v1"


def _member(n: int, role: str = "member") -> dict:
    return {
        "email": f"member{n}@acme.test",
        "password": "member-password",
        "firstName": f"Member {n}",
        "organizationRole": role,
    }


async def test_get_and_update_organization(client):
    org = (await client.get(f"{API}/organization")).json()["data"]
    assert org["name"] == "Acme Recycling"
    assert org["plan"] == "starter"
    assert org["maxUsers"] == 5

    response = await client.patch(f"{API}/organization", json={"phone": "+1 555 0100"})
    assert response.status_code == 200
    assert response.json()["data"]["phone"] == "+1 555 0100"
    assert response.json()["data"]["slug"] == org["slug"]


async def test_member_limit(client):
    for n in range(1, 5):
        response = await client.post(f"{API}/organization/members", json=_member(n))
        assert response.status_code == 201, response.text

    members = (await client.get(f"{API}/organization/members")).json()["data"]
    assert len(members) == 5
    assert members[0]["organizationRole"] == "owner"

    response = await client.post(f"{API}/organization/members", json=_member(5))
    assert response.status_code == 409


async def test_plain_members_cannot_administer(client, anon):
    await client.post(f"{API}/organization/members", json=_member(1))
    login = await anon.post(
        f"{API}/auth/login", json={"email": "member1@acme.test", "password": "member-password"}
    )
    assert login.status_code == 200

    response = await anon.patch(f"{API}/organization", json={"name": "Hijacked"})
    assert response.status_code == 403
    response = await anon.post(f"{API}/organization/members", json=_member(2))
    assert response.status_code == 403

    # Reads stay open to every member
    assert (await anon.get(f"{API}/organization")).status_code == 200


async def test_owner_role_cannot_be_granted(client):
    response = await client.post(f"{API}/organization/members", json=_member(1, role="owner"))
    assert response.status_code == 422


async def test_organizations_are_isolated(client, other_client):
    mine = (await client.get(f"{API}/organization")).json()["data"]
    theirs = (await other_client.get(f"{API}/organization")).json()["data"]
    assert mine["id"] != theirs["id"]
    members = (await other_client.get(f"{API}/organization/members")).json()["data"]
    assert [m["email"] for m in members] == ["owner@globex.test"]
