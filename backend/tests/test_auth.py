"""
Tests for admin login and the admin gate.
"""

import pytest
from httpx import AsyncClient

from dayuse.core.security import create_access_token


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient):
    """Configured credentials return a bearer token that opens admin routes."""
    response = await client.post("/api/v1/auth/login", json={
        "username": "Admin",
        "password": "eva1997",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"

    admin = await client.get(
        "/api/v1/admin/days",
        params={"year": 2024, "month": 7},
        headers={"Authorization": f"Bearer {data['access_token']}"},
    )
    assert admin.status_code == 200


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient):
    response = await client.post("/api/v1/auth/login", json={
        "username": "Admin",
        "password": "wrongpassword",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_login_username_is_case_sensitive(client: AsyncClient):
    response = await client.post("/api/v1/auth/login", json={
        "username": "admin",
        "password": "eva1997",
    })
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_requires_token(client: AsyncClient):
    response = await client.get("/api/v1/admin/days")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_rejects_garbage_token(client: AsyncClient):
    response = await client.get(
        "/api/v1/admin/days",
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_admin_rejects_non_admin_token(client: AsyncClient):
    token = create_access_token(data={"sub": "visitor"})
    response = await client.get(
        "/api/v1/admin/days",
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 401
