"""Tests for the permission catalog and sync-status endpoints."""

from httpx import AsyncClient


async def test_catalog_grouped_by_module(client: AsyncClient) -> None:
    response = await client.get("/api/v1/permissions")
    assert response.status_code == 200
    groups = response.json()
    assert [g["module"] for g in groups][:2] == ["crm", "finance"]
    crm_read = groups[0]["permissions"][0]
    assert crm_read == {
        "name": "crm:read",
        "description": "View customer data",
        "module": "crm",
        "action": "read",
        "label": "Crm: Read",
        "color": "bg-blue-100 text-blue-800",
    }
    names = {p["name"] for g in groups for p in g["permissions"]}
    assert "billing:read" not in names


async def test_sync_status_empty_storage(client: AsyncClient) -> None:
    response = await client.post("/api/v1/permissions/sync-status", json={})
    assert response.status_code == 200
    data = response.json()
    assert data["needs_sync"] is True
    assert data["statistics"]["to_add"] == 26
    assert data["statistics"]["sync_percentage"] == 0
    assert "billing" in data["modules_needing_sync"]


async def test_sync_status_reports_obsolete_rows(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/permissions/sync-status",
        json={
            "permissions": [
                {"name": "legacy:thing", "module": "legacy", "action": "thing"},
                {
                    "name": "crm:read",
                    "module": "crm",
                    "action": "read",
                    "description": "View crm data and information",
                },
            ]
        },
    )
    data = response.json()
    assert data["statistics"]["matched"] == 1
    assert data["statistics"]["total_in_db"] == 2
    assert [p["name"] for p in data["permissions_to_remove"]] == ["legacy:thing"]
    assert data["permissions_to_update"] == []
    assert "legacy" in data["modules_needing_sync"]
