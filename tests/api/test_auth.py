"""
Tests for JWT authentication middleware.
"""

from fastapi.testclient import TestClient

from api import app
from api.dependencies import get_auth_service
from modules.auth.service import AuthService

from tests.conftest import create_test_token


class TestAuthentication:
    def test_missing_auth_header(self, client):
        """Request without auth header should return 401."""
        response = client.get("/api/users/me")
        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["detail"] == "Missing authorization header"

    def test_protected_route_with_valid_token(self, client, auth_headers):
        response = client.get("/api/users/me", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "test-user-123"
        assert data["email"] == "test@example.com"

    def test_protected_route_with_expired_token(self, client):
        token = create_test_token(expired=True)
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert "expired" in response.json()["detail"].lower()

    def test_invalid_token(self, client):
        response = client.get("/api/users/me", headers={"Authorization": "Bearer invalid-token"})
        assert response.status_code == 401
        assert "Invalid token" in response.json()["detail"]

    def test_token_signed_with_other_secret(self, client):
        token = create_test_token(secret="someone-elses-secret")
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_missing_jwt_secret(self, client, auth_headers):
        """Missing JWT secret should return 401."""
        app.dependency_overrides[get_auth_service] = lambda: AuthService(jwt_secret="")
        response = client.get("/api/users/me", headers=auth_headers)
        assert response.status_code == 401
        assert "not configured" in response.json()["detail"].lower()
