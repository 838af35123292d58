"""HTTP tests for the API routes (stores swapped via dependency overrides)."""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.main import app
from postboard.routes.deps import get_post_repository, get_session_store, get_user_repository


@pytest.fixture
def wired_app(sessions, users, posts):
    """App with in-memory stores and the fake session cache."""
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_post_repository] = lambda: posts
    yield app
    app.dependency_overrides.clear()


def _client(wired_app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=wired_app), base_url="http://test")


@pytest.fixture
async def client(wired_app):
    """Create test client."""
    async with _client(wired_app) as ac:
        yield ac


async def _signup(client: AsyncClient, email: str = "a@x.com", name: str = "A") -> dict:
    response = await client.post(
        "/v1/auth/signup",
        json={"name": name, "email": email, "phone": "", "password": "p"},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test health endpoint returns ok."""
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
async def test_signup_sets_session_cookie(client: AsyncClient) -> None:
    data = await _signup(client)

    assert "sessionId" in client.cookies
    assert data["sessionId"]
    assert data["user"]["name"] == "A"
    assert data["user"]["email"] == "a@x.com"
    assert data["user"]["posts"] == []
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


@pytest.mark.asyncio
async def test_signup_without_email_or_phone(client: AsyncClient) -> None:
    response = await client.post(
        "/v1/auth/signup", json={"name": "A", "email": "", "phone": "", "password": "p"}
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_signup_missing_password_field(client: AsyncClient) -> None:
    response = await client.post("/v1/auth/signup", json={"name": "A", "email": "a@x.com"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient, wired_app) -> None:
    await _signup(client)
    async with _client(wired_app) as other:
        response = await other.post(
            "/v1/auth/signup",
            json={"name": "B", "email": "a@x.com", "phone": "", "password": "q"},
        )
    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


@pytest.mark.asyncio
async def test_login_and_logout(client: AsyncClient, wired_app) -> None:
    signed_up = await _signup(client)

    async with _client(wired_app) as other:
        bad = await other.post(
            "/v1/auth/login", json={"email": "a@x.com", "phone": "", "password": "wrong"}
        )
        assert bad.status_code == 401
        assert bad.json()["error"]["message"] == "Invalid Login"

        good = await other.post(
            "/v1/auth/login", json={"email": "a@x.com", "phone": "", "password": "p"}
        )
        assert good.status_code == 200
        assert good.json()["user"]["id"] == signed_up["user"]["id"]

        mine = await other.get("/v1/posts/current-user")
        assert mine.status_code == 200

        out = await other.post("/v1/auth/logout")
        assert out.json() == {"success": True}

        mine = await other.get("/v1/posts/current-user")
        assert mine.status_code == 401
        assert mine.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


@pytest.mark.asyncio
async def test_post_lifecycle(client: AsyncClient) -> None:
    user = (await _signup(client))["user"]

    created = await client.post("/v1/posts", json={"authorId": user["id"], "content": "hello"})
    assert created.status_code == 200
    post = created.json()
    assert post["content"] == "hello"
    assert post["author"]["id"] == user["id"]
    assert post["author"]["posts"] == [{"id": post["id"], "authorId": user["id"], "content": "hello"}]

    updated = await client.patch(f"/v1/posts/{post['id']}", json={"content": "edited"})
    assert updated.status_code == 200
    assert updated.json()["content"] == "edited"

    listed = await client.get(f"/v1/posts/by-user/{user['id']}")
    assert [p["content"] for p in listed.json()] == ["edited"]

    deleted = await client.delete(f"/v1/posts/{post['id']}")
    assert deleted.json() == {"success": True}

    listed = await client.get(f"/v1/posts/by-user/{user['id']}")
    assert listed.json() == []


@pytest.mark.asyncio
async def test_posts_by_user_is_public(client: AsyncClient, wired_app) -> None:
    user = (await _signup(client))["user"]
    await client.post("/v1/posts", json={"authorId": user["id"], "content": "public"})

    async with _client(wired_app) as anonymous:
        response = await anonymous.get(f"/v1/posts/by-user/{user['id']}")
    assert response.status_code == 200
    assert [p["content"] for p in response.json()] == ["public"]


@pytest.mark.asyncio
async def test_mutations_by_other_user(client: AsyncClient, wired_app) -> None:
    alice = (await _signup(client, email="alice@x.com"))["user"]
    post = (await client.post("/v1/posts", json={"authorId": alice["id"], "content": "a"})).json()

    async with _client(wired_app) as bob_client:
        await _signup(bob_client, email="bob@x.com", name="Bob")

        spoof = await bob_client.post("/v1/posts", json={"authorId": alice["id"], "content": "b"})
        assert spoof.status_code == 403
        assert spoof.json()["error"]["code"] == "UNAUTHORIZED"

        edit = await bob_client.patch(f"/v1/posts/{post['id']}", json={"content": "b"})
        assert edit.status_code == 403

        delete = await bob_client.delete(f"/v1/posts/{post['id']}")
        assert delete.status_code == 403


@pytest.mark.asyncio
async def test_missing_post_is_404(client: AsyncClient) -> None:
    response = await client.patch("/v1/posts/nope", json={"content": "x"})
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"

    response = await client.delete("/v1/posts/nope")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_openapi_documents_error_envelope(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert "ErrorResponse" in schema["components"]["schemas"]
    assert "/v1/auth/signup" in schema["paths"]
