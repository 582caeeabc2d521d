"""Tests for custom-role validation endpoints."""

from httpx import AsyncClient


async def test_validate_reports_every_error(client: AsyncClient) -> None:
    """POST /custom-roles/validate returns 200 with every reason when invalid."""
    response = await client.post(
        "/api/v1/custom-roles/validate",
        json={"creator_role": "EMPLOYEE", "permissions": ["hr:admin"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["valid"] is False
    assert data["ungrantable_permissions"] == ["hr:admin"]
    assert data["errors"] == [
        "You cannot grant admin permissions (hr:admin) because you don't have admin access to hr",
        "Custom role must include at least one read permission",
    ]
    assert data["can_create_custom_roles"] is False


async def test_validate_empty_request_is_valid(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/validate",
        json={"creator_role": "SUPER_ADMIN", "permissions": []},
    )
    data = response.json()
    assert data["valid"] is True
    assert data["can_create_custom_roles"] is True


async def test_validate_unknown_creator_role_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/validate",
        json={"creator_role": "CHIEF", "permissions": ["crm:read"]},
    )
    assert response.status_code == 422


async def test_can_grant_billing(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/can-grant",
        json={"role": "SUPER_ADMIN", "permission": "organization:billing"},
    )
    assert response.json()["allowed"] is False

    response = await client.post(
        "/api/v1/custom-roles/can-grant",
        json={"role": "ORGANIZATION_OWNER", "permission": "organization:billing"},
    )
    data = response.json()
    assert data["allowed"] is True
    assert "organization:billing" in data["grantable_permissions"]


async def test_prepare_returns_normalized_role(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/prepare",
        json={
            "creator_role": "SUPER_ADMIN",
            "name": "  Sales Intern  ",
            "permissions": ["crm:write", "crm:read", "crm:read"],
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Sales Intern"
    assert data["permissions"] == ["crm:read", "crm:write"]
    assert data["color"] == "bg-blue-100 text-blue-800"
    assert data["description"] is None


async def test_prepare_forbidden_below_level_five(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/prepare",
        json={
            "creator_role": "DEPARTMENT_MANAGER",
            "name": "Helper",
            "permissions": ["crm:read"],
        },
    )
    assert response.status_code == 403
    assert response.json()["error"] == "PERMISSION_DENIED"


async def test_prepare_invalid_set_returns_400(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/custom-roles/prepare",
        json={
            "creator_role": "SUPER_ADMIN",
            "name": "Billing Clerk",
            "permissions": ["billing:read"],
        },
    )
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "CUSTOM_ROLE_INVALID"
    assert data["details"]["ungrantable_permissions"] == ["billing:read"]
    assert data["details"]["errors"] == [
        "You cannot grant billing permissions (billing:read) - only Organization Owners can manage billing",
        "Invalid permissions: billing:read",
    ]
