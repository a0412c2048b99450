"""E2E test fixtures for API layer testing."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from migration_planner.infrastructure.api.main import app


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing the API."""
    transport = ASGITransport(app=app)

    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as client:
        yield client


@pytest.fixture
def account_components() -> list[dict]:
    """Extractor output for a small account management app.

    vf:AccountPage includes c:AccountCard and uses apex:AccountController.
    c:AccountCard and c:AccountTabs reference each other.
    c:AccountTabs uses lightning:tabset (base component).
    c:Legacy is not referenced by anything.
    """
    return [
        {
            "id": "vf:AccountPage",
            "name": "AccountPage",
            "kind": "vf",
            "file_path": "pages/AccountPage.page",
            "dependencies": [
                {"target": "c:AccountCard", "kind": "include", "line_number": 12},
                {
                    "target": "apex:AccountController",
                    "kind": "controller",
                    "line_number": 1,
                    "expression": 'controller="AccountController"',
                },
            ],
        },
        {
            "id": "c:AccountCard",
            "name": "AccountCard",
            "kind": "aura",
            "file_path": "aura/AccountCard/AccountCard.cmp",
            "dependencies": [
                {"target": "c:AccountTabs", "kind": "component", "line_number": 8},
                {"target": "apex:AccountController", "kind": "controller"},
            ],
        },
        {
            "id": "c:AccountTabs",
            "name": "AccountTabs",
            "kind": "aura",
            "dependencies": [
                {"target": "c:AccountCard", "kind": "event"},
                {"target": "lightning:tabset", "kind": "baseComponent"},
            ],
        },
        {"id": "c:Legacy", "name": "Legacy", "kind": "aura"},
    ]
