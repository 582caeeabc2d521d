"""Tests for the read-only roles endpoints."""

from httpx import AsyncClient


async def test_list_roles_in_canonical_order(client: AsyncClient) -> None:
    """GET /api/v1/roles returns all ten predefined roles, owner first."""
    response = await client.get("/api/v1/roles")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 10
    assert data[0]["role"] == "ORGANIZATION_OWNER"
    assert data[0]["level"] == 6
    assert data[-1]["role"] == "VIEWER"


async def test_role_detail(client: AsyncClient) -> None:
    """GET /api/v1/roles/SUPER_ADMIN includes delegation and assignment rules."""
    response = await client.get("/api/v1/roles/SUPER_ADMIN")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Super Admin"
    assert data["assignment_rank"] == 4
    assert data["can_create_custom_roles"] is True
    assert data["can_manage_roles"] is True
    assert "SUPER_ADMIN" not in data["assignable_roles"]
    assert "ORGANIZATION_OWNER" not in data["assignable_roles"]
    assert "organization:billing" not in data["grantable_permissions"]


async def test_role_detail_is_case_insensitive(client: AsyncClient) -> None:
    response = await client.get("/api/v1/roles/employee")
    assert response.status_code == 200
    data = response.json()
    assert data["role"] == "EMPLOYEE"
    assert data["assignable_roles"] == []
    assert data["can_create_custom_roles"] is False


async def test_unknown_role_returns_404(client: AsyncClient) -> None:
    response = await client.get("/api/v1/roles/CHIEF")
    assert response.status_code == 404
    data = response.json()
    assert data["error"] == "UNKNOWN_ROLE"
    assert data["details"] == {"role": "CHIEF"}


async def test_error_body_carries_request_id(client: AsyncClient) -> None:
    """Error responses include the request ID echoed in the header."""
    response = await client.get(
        "/api/v1/roles/CHIEF", headers={"X-Request-ID": "trace-42"}
    )
    assert response.status_code == 404
    assert response.json()["request_id"] == "trace-42"
    assert response.headers["x-request-id"] == "trace-42"
