"""HTTP tests for the auth, product and seed routers."""

import uuid
from unittest.mock import patch

from loguru import logger
from sqlalchemy.exc import OperationalError
from sqlmodel import select

from src.shop.entities.core.user import UserTable
from src.shop.entities.service.product import ProductRepository, ProductTable
from tests.fixtures.services import TEST_PASSWORD

PRODUCT = {
    "title": "Wordmark Cap",
    "price": 30,
    "sizes": ["M"],
    "gender": "unisex",
    "tags": ["hat"],
    "images": ["cap-1.jpg", "cap-2.jpg"],
}


class TestHealth:
    def test_health_pings_database(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "ok"}

    def test_ready(self, client):
        assert client.get("/ready").json() == {"status": "ready"}

    def test_security_headers(self, client):
        response = client.get("/ready")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "X-Request-ID" in response.headers


class TestAuthRoutes:
    def test_register_then_check_status(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "jane@example.com", "password": "Secret1", "full_name": "Jane"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "jane@example.com"

        status = client.get(
            "/auth/check-status", headers={"Authorization": f"Bearer {body['token']}"}
        )
        assert status.status_code == 200
        assert status.json()["id"] == body["id"]

    def test_register_duplicate(self, client, owner):
        response = client.post(
            "/auth/register",
            json={"email": owner.email, "password": "Secret1", "full_name": "Again"},
        )
        assert response.status_code == 400
        assert "request_id" in response.json()

    def test_register_weak_password(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "jane@example.com", "password": "secret", "full_name": "Jane"},
        )
        assert response.status_code == 422

    def test_login(self, client, owner):
        response = client.post(
            "/auth/login", json={"email": owner.email, "password": TEST_PASSWORD}
        )
        assert response.status_code == 200
        assert response.json()["id"] == owner.id

    def test_login_wrong_password(self, client, owner):
        response = client.post(
            "/auth/login", json={"email": owner.email, "password": "Wrong1"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Credentials are not valid (password)"

    def test_check_status_requires_token(self, client):
        assert client.get("/auth/check-status").status_code == 401

    def test_private_echoes_user_and_headers(self, client, owner, auth_headers):
        response = client.get("/auth/private", headers=auth_headers(owner))

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["user_email"] == owner.email
        assert "authorization" in [part.lower() for part in body["raw_headers"]]

    def test_private2_accepts_user_role(self, client, owner, auth_headers):
        assert client.get("/auth/private2", headers=auth_headers(owner)).status_code == 200

    def test_private3_rejects_admin_only(self, client, admin, auth_headers):
        response = client.get("/auth/private3", headers=auth_headers(admin))
        assert response.status_code == 403
        assert response.json()["detail"] == "User Admin need a valid role: [user]"


class TestProductRoutes:
    def _create(self, client, headers, **overrides):
        response = client.post("/products", json={**PRODUCT, **overrides}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    def test_create_requires_authentication(self, client):
        assert client.post("/products", json=PRODUCT).status_code == 401

    def test_create_and_read_back(self, client, owner, auth_headers):
        created = self._create(client, auth_headers(owner))

        assert created["slug"] == "wordmark_cap"
        assert created["images"] == ["cap-1.jpg", "cap-2.jpg"]

        for term in (created["id"], "wordmark cap", "WORDMARK_CAP"):
            response = client.get(f"/products/{term}")
            assert response.status_code == 200
            assert response.json()["id"] == created["id"]

    def test_create_validates_gender(self, client, owner, auth_headers):
        response = client.post(
            "/products", json={**PRODUCT, "gender": "other"}, headers=auth_headers(owner)
        )
        assert response.status_code == 422

    def test_list_paginates(self, client, owner, auth_headers):
        headers = auth_headers(owner)
        for index in range(3):
            self._create(client, headers, title=f"Cap {index}")

        response = client.get("/products", params={"limit": 2, "offset": 1})

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["Cap 1", "Cap 2"]

    def test_list_rejects_zero_limit(self, client):
        assert client.get("/products", params={"limit": 0}).status_code == 422

    def test_get_unknown(self, client):
        response = client.get("/products/nothing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Not found id nothing"

    def test_update_requires_admin(self, client, owner, auth_headers):
        created = self._create(client, auth_headers(owner))
        response = client.patch(
            f"/products/{created['id']}", json={"price": 1}, headers=auth_headers(owner)
        )
        assert response.status_code == 403

    def test_update_replaces_images(self, client, owner, admin, auth_headers):
        created = self._create(client, auth_headers(owner))

        response = client.patch(
            f"/products/{created['id']}",
            json={"images": ["new.jpg"], "stock": 4},
            headers=auth_headers(admin),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["images"] == ["new.jpg"]
        assert body["stock"] == 4
        assert body["user_id"] == admin.id

    def test_update_requires_uuid(self, client, admin, auth_headers):
        response = client.patch("/products/cap", json={}, headers=auth_headers(admin))
        assert response.status_code == 422

    def test_update_duplicate_title(self, client, owner, admin, auth_headers):
        self._create(client, auth_headers(owner), title="Taken")
        created = self._create(client, auth_headers(owner))

        response = client.patch(
            f"/products/{created['id']}", json={"title": "Taken"}, headers=auth_headers(admin)
        )
        assert response.status_code == 400

    def test_delete(self, client, owner, admin, auth_headers, session):
        created = self._create(client, auth_headers(owner))

        response = client.delete(f"/products/{created['id']}", headers=auth_headers(admin))

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        assert session.get(ProductTable, created["id"]) is None
        assert client.get(f"/products/{created['id']}").status_code == 404

    def test_delete_unknown(self, client, admin, auth_headers):
        response = client.delete(f"/products/{uuid.uuid4()}", headers=auth_headers(admin))
        assert response.status_code == 404

    def test_storage_failure_is_logged_once(self, client, owner, auth_headers):
        headers = auth_headers(owner)
        records = []
        sink_id = logger.add(records.append, level="ERROR")
        failure = OperationalError("INSERT", {}, Exception("connection lost"))
        try:
            with patch.object(ProductRepository, "create", side_effect=failure):
                response = client.post("/products", json=PRODUCT, headers=headers)
        finally:
            logger.remove(sink_id)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal Server Error"
        assert len(records) == 1


class TestSeedRoute:
    def test_seed_replaces_data(self, client, owner, session):
        response = client.get("/seed")

        assert response.status_code == 200
        assert response.json() == "SEED EXECUTED"

        emails = {user.email for user in session.exec(select(UserTable)).all()}
        assert owner.email not in emails
        assert "test1@google.com" in emails
        assert len(session.exec(select(ProductTable)).all()) == 5
