from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from store_counts import count_edges

SIM_AUTH = "Basic c2ltdWxhdG9yOnN1cGVyX3NhZmUh"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/api/health/")
    assert response.status_code == 200
    assert response.json()["ok"] is True


@pytest.mark.asyncio
async def test_register_then_latest(client):
    response = await client.post(
        "/register?latest=42",
        json={"username": "newbie", "email": "newbie@mail.com", "pwd": "pw"},
    )
    assert response.status_code == 204
    assert response.content == b""

    latest = await client.get("/latest")
    assert latest.status_code == 200
    assert latest.json() == {"latest": 42}


@pytest.mark.asyncio
async def test_register_bad_request_body(client):
    response = await client.post(
        "/register",
        json={"username": "newbie", "email": "no-at-sign", "pwd": "pw"},
    )
    assert response.status_code == 400
    assert response.json() == {
        "error_msg": "You have to enter a valid email address",
        "status_code": 400,
    }


@pytest.mark.asyncio
async def test_login_ok_and_unauthorized(client):
    ok = await client.post("/login", json={"username": "TestUser1", "pwd": "user1"})
    assert ok.status_code == 200
    assert ok.json()["username"] == "TestUser1"
    assert "access_token" in ok.json()

    bad = await client.post("/login", json={"username": "TestUser3", "pwd": "user1"})
    assert bad.status_code == 401
    assert bad.json() == {"error_msg": "Incorrect password or username", "status_code": 401}

    unknown = await client.post("/login", json={"username": "nobody", "pwd": "x"})
    assert unknown.status_code == 401
    assert unknown.json()["error_msg"] == "Username does not match a user"


@pytest.mark.asyncio
async def test_follow_flow(client, db):
    response = await client.post("/fllws/TestUser1", json={"follow": "TestUser2"})
    assert response.status_code == 204
    assert await count_edges(db, 1, 2) == 1

    follows = await client.get("/fllws/TestUser1")
    assert follows.json() == {"follows": ["TestUser2"]}

    response = await client.post("/fllws/TestUser1", json={"unfollow": "TestUser2"})
    assert response.status_code == 204
    assert await count_edges(db, 1, 2) == 0

    again = await client.post("/fllws/TestUser1", json={"unfollow": "TestUser2"})
    assert again.status_code == 400
    assert again.json()["status_code"] == 400


@pytest.mark.asyncio
async def test_messages_flow(client):
    response = await client.post("/msgs/TestUser1?latest=3", json={"content": "hola 🌴"})
    assert response.status_code == 204

    public = await client.get("/msgs", params={"no": 20})
    assert public.status_code == 200
    assert public.headers["content-type"] == "application/json; charset=utf-8"
    [msg] = public.json()
    assert msg["content"] == "hola 🌴"
    assert msg["user"] == "TestUser1"
    assert msg["pub_date"]

    mine = await client.get("/msgs/TestUser1")
    assert [m["content"] for m in mine.json()] == ["hola 🌴"]

    missing = await client.post("/msgs/TestUser1337", json={"content": "x"})
    assert missing.status_code == 400


@pytest.mark.asyncio
async def test_simulator_authorization_required_when_configured(client, test_settings):
    test_settings.SIMULATOR_AUTHORIZATION = SIM_AUTH

    denied = await client.post("/fllws/TestUser1", json={"follow": "TestUser2"})
    assert denied.status_code == 403
    assert denied.json() == {
        "error_msg": "You are not authorized to use this resource!",
        "status_code": 403,
    }

    allowed = await client.post(
        "/fllws/TestUser1",
        json={"follow": "TestUser2"},
        headers={"Authorization": SIM_AUTH},
    )
    assert allowed.status_code == 204

    # /latest no exige autorización
    assert (await client.get("/latest")).status_code == 200


@pytest.mark.asyncio
async def test_register_without_body_is_bad_request(client):
    response = await client.post("/register")

    assert response.status_code == 400
    body = response.json()
    assert body["status_code"] == 400
    assert body["error_msg"].startswith("Invalid request")


@pytest.mark.asyncio
async def test_register_with_wrongly_typed_field_is_bad_request(client):
    response = await client.post(
        "/register",
        json={"username": 123, "email": "a@b.com", "pwd": "pw"},
    )

    assert response.status_code == 400
    assert response.json()["status_code"] == 400
    assert "username" in response.json()["error_msg"]


@pytest.mark.asyncio
async def test_follow_with_broken_json_is_bad_request(client, db):
    response = await client.post(
        "/fllws/TestUser1",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["status_code"] == 400
    assert await count_edges(db, 1, 2) == 0


@pytest.mark.asyncio
async def test_non_integer_latest_is_bad_request(client):
    response = await client.get("/msgs", params={"latest": "abc"})

    assert response.status_code == 400
    assert "latest" in response.json()["error_msg"]


@pytest.mark.asyncio
async def test_register_overlong_username_is_bad_request(client):
    response = await client.post(
        "/register",
        json={"username": "u" * 51, "email": "long@mail.com", "pwd": "pw"},
    )

    assert response.status_code == 400
    assert response.json() == {
        "error_msg": "The username can have at most 50 characters",
        "status_code": 400,
    }


@pytest.mark.asyncio
async def test_store_failure_is_internal_error(client, monkeypatch):
    async def _db_down(db, username):
        raise OperationalError("SELECT users.id", {}, Exception("database is down"))

    monkeypatch.setattr("minitwit.messages.service.get_user_id_by_username", _db_down)

    response = await client.post("/msgs/TestUser1", json={"content": "hola"})

    assert response.status_code == 500
    assert response.json() == {"error_msg": "internal error", "status_code": 500}
