"""Genre HTTP API tests against in-memory gateways."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from tests.fakes import InMemoryGenreGateway


async def _category(api_client: AsyncClient, name: str) -> str:
    response = await api_client.post("/categories", json={"name": name})
    return response.json()["id"]


async def test_create_genre_with_categories(
    api_client: AsyncClient, genre_gateway: InMemoryGenreGateway
) -> None:
    c1 = await _category(api_client, "Filmes")
    c2 = await _category(api_client, "Séries")
    response = await api_client.post(
        "/genres", json={"name": "Ação", "is_active": True, "categories_id": [c1, c2]}
    )
    assert response.status_code == 201
    genre_id = response.json()["id"]
    assert response.headers["location"] == f"/genres/{genre_id}"

    body = (await api_client.get(f"/genres/{genre_id}")).json()
    assert body["name"] == "Ação"
    assert body["categories_id"] == [c1, c2]
    assert body["is_active"] is True
    assert genre_gateway.rows[genre_id].categories == [c1, c2]


async def test_create_genre_with_unknown_category_returns_422(api_client: AsyncClient) -> None:
    response = await api_client.post(
        "/genres", json={"name": None, "categories_id": ["123", "456"]}
    )
    assert response.status_code == 422
    assert response.json() == {
        "errors": [
            {"message": "Some categories could not be found: 123, 456"},
            {"message": "'name' should not be null"},
        ]
    }


async def test_update_genre_replaces_categories(api_client: AsyncClient) -> None:
    c1 = await _category(api_client, "Filmes")
    c2 = await _category(api_client, "Séries")
    genre_id = (
        await api_client.post("/genres", json={"name": "Ação", "categories_id": [c1]})
    ).json()["id"]
    response = await api_client.put(
        f"/genres/{genre_id}",
        json={"name": "Aventura", "is_active": False, "categories_id": [c2]},
    )
    assert response.status_code == 200
    assert response.json() == {"id": genre_id}
    body = (await api_client.get(f"/genres/{genre_id}")).json()
    assert body["categories_id"] == [c2]
    assert body["deleted_at"] is not None


async def test_get_missing_genre_returns_404(api_client: AsyncClient) -> None:
    response = await api_client.get("/genres/g1")
    assert response.status_code == 404
    assert response.json() == {"message": "Genre with ID g1 not found"}


async def test_delete_genre(api_client: AsyncClient) -> None:
    genre_id = (await api_client.post("/genres", json={"name": "Ação"})).json()["id"]
    assert (await api_client.delete(f"/genres/{genre_id}")).status_code == 204
    assert (await api_client.get(f"/genres/{genre_id}")).status_code == 404


async def test_list_genres(api_client: AsyncClient) -> None:
    for name in ("Drama", "Ação", "Comédia"):
        await api_client.post("/genres", json={"name": name})
    body = (
        await api_client.get("/genres", params={"sort": "name", "dir": "desc", "perPage": 2})
    ).json()
    assert body["total"] == 3
    assert [item["name"] for item in body["items"]] == ["Drama", "Comédia"]
    assert set(body["items"][0]) == {"id", "name", "is_active", "created_at", "deleted_at"}


async def test_list_genres_rejects_description_sort(api_client: AsyncClient) -> None:
    response = await api_client.get("/genres", params={"sort": "description"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Invalid sort field: description"}]}


async def test_list_genres_rejects_bad_direction(api_client: AsyncClient) -> None:
    response = await api_client.get("/genres", params={"dir": "up"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Invalid sort direction: up"}]}


async def test_create_genre_storage_failure_returns_422(
    api_client: AsyncClient, genre_gateway: InMemoryGenreGateway
) -> None:
    genre_gateway.fail_with = RuntimeError("Gateway error")
    response = await api_client.post("/genres", json={"name": "Ação"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Gateway error"}]}
    assert genre_gateway.rows == {}


async def test_update_genre_storage_failure_returns_422(
    api_client: AsyncClient, genre_gateway: InMemoryGenreGateway
) -> None:
    genre_id = (await api_client.post("/genres", json={"name": "Ação"})).json()["id"]
    genre_gateway.fail_with = RuntimeError("Gateway error")
    response = await api_client.put(f"/genres/{genre_id}", json={"name": "Aventura"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Gateway error"}]}
    assert genre_gateway.rows[genre_id].name == "Ação"


async def test_get_genre_storage_failure_returns_500(
    server_error_client: AsyncClient, genre_gateway: InMemoryGenreGateway
) -> None:
    genre_gateway.find_by_id = AsyncMock(side_effect=RuntimeError("connection lost"))
    response = await server_error_client.get("/genres/g1")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
