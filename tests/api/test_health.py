"""Tests for the health and public config endpoints."""

from datetime import datetime

from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


class TestHealthEndpoint:
    def test_health_check(self):
        """Health endpoint should return 200 with status and timestamp."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == {"status", "timestamp"}
        assert data["status"] == "ok"
        assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00")).tzinfo is not None


class TestClientConfigEndpoint:
    def test_public_values_in_camel_case(self, client):
        response = client.get("/config")

        assert response.status_code == 200
        data = response.json()
        assert data["paystackPublicKey"] == "pk_test_123"
        assert data["supabaseUrl"] == "https://project.supabase.co"
        assert data["supabaseAnonKey"] == "anon-key"
        assert data["currency"] == "GHS"
        assert data["accessDurationHours"] == 24
        assert data["featuredVideoId"] == "gis_documentary_001"
        assert "auth/popup-blocked" in data["signInErrorMessages"]
        assert data["defaultSignInErrorMessage"]

    def test_secrets_are_not_exposed(self, client):
        body = client.get("/config").text
        assert "sk_test_123" not in body
        assert "test-secret-key-for-testing-only" not in body
