API = "/api/v1"


async def _create_token(client, name="CI pipeline"):
    response = await client.post(f"{API}/api-tokens", json={"name": name, "permissions": ["read"]})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_token_is_shown_once_then_masked(client):
    created = await _create_token(client)
    raw = created["token"]
    assert raw.startswith("wt_")
    assert len(raw) == 3 + 64

    listed = (await client.get(f"{API}/api-tokens")).json()["data"]
    assert len(listed) == 1
    assert listed[0]["id"] == created["id"]
    assert listed[0]["token"] == f"{raw[:8]}...{raw[-4:]}"
    assert listed[0]["permissions"] == ["read"]


async def test_bearer_token_authenticates(client, anon):
    raw = (await _create_token(client))["token"]

    response = await anon.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {raw}"})
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "owner@acme.test"

    listed = (await client.get(f"{API}/api-tokens")).json()["data"]
    assert listed[0]["lastUsed"] is not None


async def test_revoked_token_stops_working(client, anon):
    created = await _create_token(client)
    headers = {"Authorization": f"Bearer {created['token']}"}

    revoke = await client.delete(f"{API}/api-tokens/{created['id']}")
    assert revoke.status_code == 204
    assert (await client.get(f"{API}/api-tokens")).json()["data"] == []

    response = await anon.get(f"{API}/auth/me", headers=headers)
    assert response.status_code == 401


async def test_revoking_unknown_token_is_not_found(client):
    response = await client.delete(f"{API}/api-tokens/does-not-exist")
    assert response.status_code == 404


async def test_malformed_authorization_header(anon):
    response = await anon.get(f"{API}/auth/me", headers={"Authorization": "Token abc"})
    assert response.status_code == 401

    response = await anon.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-wt-token"})
    assert response.status_code == 401


async def test_tokens_are_private_to_their_user(client, other_client):
    await _create_token(client)
    assert (await other_client.get(f"{API}/api-tokens")).json()["data"] == []


async def test_expired_token_is_rejected(client, anon):
    response = await client.post(
        f"{API}/api-tokens", json={"name": "Old export", "expiresAt": "2020-01-01T00:00:00Z"}
    )
    assert response.status_code == 201, response.text
    headers = {"Authorization": f"Bearer {response.json()['data']['token']}"}

    rejected = await anon.get(f"{API}/auth/me", headers=headers)
    assert rejected.status_code == 401
    assert rejected.json()["error"]["message"] == "API token expired"
