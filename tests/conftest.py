"""Test fixtures: ASGI client against the app with a known admin allow-list."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from blogmark.config import settings
from blogmark.main import app

ADMIN_EMAIL = "editor@example.com"


@pytest.fixture
def admin_settings(monkeypatch):
    monkeypatch.setattr(settings, "admin_emails", [ADMIN_EMAIL])
    monkeypatch.setattr(settings, "dev_mode", False)
    return settings


@pytest.fixture
async def client(admin_settings):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"X-ExeDev-Email": ADMIN_EMAIL, "Accept": "application/json"}
