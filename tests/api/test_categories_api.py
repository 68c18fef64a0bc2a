"""Category HTTP API tests against in-memory gateways."""

from unittest.mock import AsyncMock

from httpx import AsyncClient

from tests.fakes import InMemoryCategoryGateway


async def _create(api_client: AsyncClient, name: str, description: str | None = None) -> str:
    response = await api_client.post(
        "/categories", json={"name": name, "description": description, "is_active": True}
    )
    assert response.status_code == 201
    return response.json()["id"]


async def test_create_returns_201_location_and_id(
    api_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    response = await api_client.post(
        "/categories",
        json={"name": "Filmes", "description": "A categoria mais assistida", "is_active": True},
    )
    assert response.status_code == 201
    category_id = response.json()["id"]
    assert response.headers["location"] == f"/categories/{category_id}"
    assert category_gateway.rows[category_id].name == "Filmes"


async def test_create_with_null_name_returns_422(
    api_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    response = await api_client.post(
        "/categories", json={"name": None, "description": "x", "is_active": True}
    )
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "'name' should not be null"}]}
    assert category_gateway.rows == {}


async def test_create_storage_failure_returns_422(
    api_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    category_gateway.fail_with = RuntimeError("Gateway error")
    response = await api_client.post("/categories", json={"name": "Filmes"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Gateway error"}]}


async def test_omitted_is_active_means_active(api_client: AsyncClient) -> None:
    category_id = await _create(api_client, "Filmes")
    body = (await api_client.get(f"/categories/{category_id}")).json()
    assert body["is_active"] is True
    assert body["deleted_at"] is None


async def test_get_returns_all_fields(api_client: AsyncClient) -> None:
    category_id = await _create(api_client, "Filmes", "desc")
    response = await api_client.get(f"/categories/{category_id}")
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {
        "id",
        "name",
        "description",
        "is_active",
        "created_at",
        "updated_at",
        "deleted_at",
    }
    assert body["id"] == category_id
    assert body["description"] == "desc"
    assert body["created_at"] is not None


async def test_get_missing_returns_404(api_client: AsyncClient) -> None:
    response = await api_client.get("/categories/123")
    assert response.status_code == 404
    assert response.json() == {"message": "Category with ID 123 not found"}


async def test_update_returns_id_and_deactivates(api_client: AsyncClient) -> None:
    category_id = await _create(api_client, "Film")
    response = await api_client.put(
        f"/categories/{category_id}",
        json={"name": "Filmes", "description": None, "is_active": False},
    )
    assert response.status_code == 200
    assert response.json() == {"id": category_id}
    body = (await api_client.get(f"/categories/{category_id}")).json()
    assert body["name"] == "Filmes"
    assert body["is_active"] is False
    assert body["deleted_at"] is not None


async def test_update_missing_returns_404(api_client: AsyncClient) -> None:
    response = await api_client.put("/categories/123", json={"name": "Filmes"})
    assert response.status_code == 404
    assert response.json() == {"message": "Category with ID 123 not found"}


async def test_update_blank_name_returns_422(api_client: AsyncClient) -> None:
    category_id = await _create(api_client, "Filmes")
    response = await api_client.put(f"/categories/{category_id}", json={"name": " "})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "'name' should not be empty"}]}


async def test_delete_is_idempotent(
    api_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    category_id = await _create(api_client, "Filmes")
    assert (await api_client.delete(f"/categories/{category_id}")).status_code == 204
    assert (await api_client.delete(f"/categories/{category_id}")).status_code == 204
    assert (await api_client.delete("/categories/unknown")).status_code == 204
    assert category_gateway.rows == {}


async def test_list_paginates_and_sorts(api_client: AsyncClient) -> None:
    for name in ("Filmes", "Séries", "Documentários"):
        await _create(api_client, name)
    response = await api_client.get(
        "/categories", params={"page": 0, "perPage": 1, "sort": "name", "dir": "asc"}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["current_page"] == 0
    assert body["per_page"] == 1
    assert body["total"] == 3
    assert [item["name"] for item in body["items"]] == ["Documentários"]
    assert set(body["items"][0]) == {
        "id",
        "name",
        "description",
        "is_active",
        "created_at",
        "deleted_at",
    }


async def test_list_defaults(api_client: AsyncClient) -> None:
    body = (await api_client.get("/categories")).json()
    assert body == {"current_page": 0, "per_page": 10, "total": 0, "items": []}


async def test_list_search_matches_name_and_description(api_client: AsyncClient) -> None:
    await _create(api_client, "Filmes", "A categoria MAIS ASSISTIDA")
    await _create(api_client, "Séries", None)
    await _create(api_client, "Documentários", None)

    by_name = (await api_client.get("/categories", params={"search": "doc"})).json()
    assert [item["name"] for item in by_name["items"]] == ["Documentários"]

    by_description = (
        await api_client.get("/categories", params={"search": "mais assistida"})
    ).json()
    assert by_description["total"] == 1
    assert by_description["items"][0]["name"] == "Filmes"


async def test_list_invalid_sort_returns_422(api_client: AsyncClient) -> None:
    response = await api_client.get("/categories", params={"sort": "color"})
    assert response.status_code == 422
    assert response.json() == {"errors": [{"message": "Invalid sort field: color"}]}


async def test_list_negative_page_is_request_error(api_client: AsyncClient) -> None:
    response = await api_client.get("/categories", params={"page": -1})
    assert response.status_code == 422
    body = response.json()
    assert body["message"] == "Request validation failed"
    assert body["errors"]


async def test_list_caps_per_page_at_max_page_size(api_client: AsyncClient) -> None:
    """perPage above max_page_size (100) is clamped, not rejected."""
    response = await api_client.get("/categories", params={"perPage": 1000})
    assert response.status_code == 200
    assert response.json()["per_page"] == 100


async def test_get_storage_failure_returns_500(
    server_error_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    """Read failures are not folded: they reach the generic handler."""
    category_gateway.find_by_id = AsyncMock(side_effect=RuntimeError("connection lost"))
    response = await server_error_client.get("/categories/123")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


async def test_list_storage_failure_returns_500(
    server_error_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    category_gateway.find_all = AsyncMock(side_effect=RuntimeError("connection lost"))
    response = await server_error_client.get("/categories")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


async def test_delete_storage_failure_returns_500(
    server_error_client: AsyncClient, category_gateway: InMemoryCategoryGateway
) -> None:
    category_gateway.delete_by_id = AsyncMock(side_effect=RuntimeError("connection lost"))
    response = await server_error_client.delete("/categories/123")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
