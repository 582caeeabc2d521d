"""Pytest configuration and fixtures for orgperm.

Uses orgperm.main:app for HTTP tests. The evaluator is stateless, so no
storage fixtures are needed; principals are built inline by each test.
"""

from typing import Callable

import pytest
from httpx import ASGITransport, AsyncClient

from orgperm.domain.entities import CustomAuthority, CustomRole
from orgperm.main import app


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_custom() -> Callable[..., CustomAuthority]:
    """Factory for custom-role authorities holding exactly the given names."""

    def _make(*permissions: str, name: str = "Custom Role") -> CustomAuthority:
        return CustomAuthority(CustomRole(id="cr-1", name=name, permissions=permissions))

    return _make
