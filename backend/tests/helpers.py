"""Request helpers shared by the API tests."""

from httpx import AsyncClient


def user_data(email: str = "a@b.com", **overrides) -> dict:
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": email,
        "password": "password",
    }
    data.update(overrides)
    return data


async def create_user(client: AsyncClient, **kwargs) -> dict:
    response = await client.post("/api/users", json=user_data(**kwargs))
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def auth_headers(client: AsyncClient, email: str, password: str = "password") -> dict:
    response = await client.post(
        "/api/users/auth",
        json={"email": email, "password": password, "token_name": "tests"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['data']}"}
