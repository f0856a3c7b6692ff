from datetime import timedelta

from conftest import ADMIN_PASSWORD

from app.models.admin_model import Admin
from app.schemas.user_schema import Role
from app.security.auth import create_access_token
from app.services.admin_crud import admin_crud


class TestAdminLogin:
    def test_admin_login_success(self, client):
        response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["token"]

    def test_admin_login_wrong_password(self, client):
        response = client.post("/api/admin/login", json={"password": "not-the-password"})
        assert response.status_code == 401

    def test_admin_login_missing_password(self, client):
        response = client.post("/api/admin/login", json={"password": ""})
        assert response.status_code == 400

    def test_admin_seeded_once(self, client, db_session):
        # A later seed with a different password neither duplicates nor resets the admin
        admin_crud.ensure_admin(db_session, "another-password")

        assert db_session.query(Admin).count() == 1
        response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
        assert response.status_code == 200


class TestAuthorizationGuard:
    def test_missing_token(self, client):
        response = client.get("/api/bookings")
        assert response.status_code == 401
        assert response.json()["detail"] == "No token provided"

    def test_non_bearer_scheme(self, client):
        response = client.get("/api/bookings", headers={"Authorization": "Basic YWRtaW46YWRtaW4="})
        assert response.status_code == 401

    def test_garbage_token(self, client):
        response = client.get("/api/bookings", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token"

    def test_expired_admin_token(self, client):
        token, _ = create_access_token(1, Role.admin, expires_delta=timedelta(seconds=-5))

        response = client.get("/api/bookings", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401

    def test_valid_admin_token(self, client, admin_headers):
        response = client.get("/api/bookings", headers=admin_headers)
        assert response.status_code == 200
        assert response.json() == {"bookings": []}
