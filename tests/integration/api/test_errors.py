import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.domain.errors import DuplicateKeyError
from tests.utils.api_helpers import IntegrationConfig


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/api/consoles")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Route not found: GET /api/consoles"}


@pytest.mark.asyncio
async def test_unknown_route_names_method(client: AsyncClient):
    response = await client.delete("/api/nowhere")

    assert response.json()["message"] == "Route not found: DELETE /api/nowhere"


@pytest.mark.asyncio
async def test_malformed_json_is_a_validation_error(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/games",
        content="{not json",
        headers={**admin_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


class ProductionConfig(IntegrationConfig):
    ENVIRONMENT = "production"


def _failing_app(config, sql, mongo, exc):
    app = create_app(config, sql=sql, mongo=mongo)

    @app.get("/api/boom")
    async def boom():
        raise exc

    return app


async def _get_boom(app):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.get("/api/boom")


@pytest.mark.asyncio
async def test_duplicate_key_is_conflict(sql, mongo):
    app = _failing_app(IntegrationConfig, sql, mongo, DuplicateKeyError("email", "a@b.c"))

    response = await _get_boom(app)

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "DUPLICATE_KEY"
    assert body["errors"] == [{"field": "email", "message": 'The value "a@b.c" already exists'}]


@pytest.mark.asyncio
async def test_unexpected_error_includes_stack_outside_production(sql, mongo):
    app = _failing_app(IntegrationConfig, sql, mongo, RuntimeError("kaboom"))

    response = await _get_boom(app)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "kaboom"
    assert "RuntimeError" in body["stack"]


@pytest.mark.asyncio
async def test_unexpected_error_hides_stack_in_production(sql, mongo):
    app = _failing_app(ProductionConfig, sql, mongo, RuntimeError("kaboom"))

    response = await _get_boom(app)

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Internal server error"
    assert "stack" not in body
