"""Tests for /students endpoints."""

from fastapi.testclient import TestClient

from app.main import create_app

ARUN = {"name": "Arun Kumar", "department": "CSE", "email": "arun@example.com"}
SANJITH = {"name": "Sanjith", "department": "CSE", "email": "sanjith@example.com"}


class TestCreateStudent:
    """Tests for POST /students."""

    def test_create_returns_200_with_id(self, client):
        response = client.post("/students", json=ARUN)
        assert response.status_code == 200
        assert response.json() == {"id": 1, **ARUN}

    def test_create_ignores_client_id(self, client):
        response = client.post("/students", json={"id": 42, **ARUN})
        assert response.status_code == 200
        assert response.json()["id"] == 1

    def test_create_missing_field(self, client):
        response = client.post("/students", json={"name": "Arun Kumar", "department": "CSE"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "email" in error["details"]

    def test_create_malformed_json(self, client):
        response = client.post(
            "/students",
            content=b'{"name": "Arun",',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_create_null_field(self, client):
        response = client.post("/students", json={**ARUN, "department": None})
        assert response.status_code == 400


class TestListStudents:
    """Tests for GET /students."""

    def test_list_empty(self, client):
        response = client.get("/students")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_after_create(self, client):
        created = [client.post("/students", json=body).json() for body in (ARUN, SANJITH)]
        response = client.get("/students")
        assert response.status_code == 200
        assert response.json() == created


class TestGetStudent:
    """Tests for GET /students/{id}."""

    def test_get_existing(self, client):
        created = client.post("/students", json=ARUN).json()
        response = client.get(f"/students/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_is_empty_404(self, client):
        response = client.get("/students/99")
        assert response.status_code == 404
        assert response.content == b""

    def test_get_non_integer_id(self, client):
        response = client.get("/students/abc")
        assert response.status_code == 400


class TestUpdateStudent:
    """Tests for PUT /students/{id}."""

    def test_update_existing(self, client):
        created = client.post("/students", json=ARUN).json()
        response = client.put(f"/students/{created['id']}", json=SANJITH)
        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **SANJITH}
        assert client.get(f"/students/{created['id']}").json()["name"] == "Sanjith"

    def test_update_missing_is_404_and_creates_nothing(self, client):
        response = client.put("/students/5", json=SANJITH)
        assert response.status_code == 404
        assert response.content == b""
        assert client.get("/students").json() == []

    def test_update_partial_body_rejected(self, client):
        created = client.post("/students", json=ARUN).json()
        response = client.put(f"/students/{created['id']}", json={"name": "Sanjith"})
        assert response.status_code == 400
        assert client.get(f"/students/{created['id']}").json() == created


class TestDeleteStudent:
    """Tests for DELETE /students/{id}."""

    def test_delete_existing(self, client):
        created = client.post("/students", json=ARUN).json()
        response = client.delete(f"/students/{created['id']}")
        assert response.status_code == 200
        assert response.content == b""
        assert client.get(f"/students/{created['id']}").status_code == 404

    def test_delete_twice(self, client):
        created = client.post("/students", json=ARUN).json()
        assert client.delete(f"/students/{created['id']}").status_code == 200
        response = client.delete(f"/students/{created['id']}")
        assert response.status_code == 404
        assert response.content == b""


def test_full_lifecycle(client):
    """POST, GET, PUT, DELETE, GET on the same record."""
    response = client.post("/students", json=ARUN)
    assert response.status_code == 200
    assert response.json() == {"id": 1, **ARUN}

    response = client.get("/students/1")
    assert response.json() == {"id": 1, **ARUN}

    response = client.put("/students/1", json=SANJITH)
    assert response.status_code == 200
    assert response.json() == {"id": 1, **SANJITH}

    assert client.delete("/students/1").status_code == 200
    assert client.get("/students/1").status_code == 404


def test_storage_unavailable_returns_500(broken_store):
    """Database errors become a 500 error envelope."""
    app = create_app(store=broken_store, migrate=False)
    # Startup is skipped: the connection check would fail before any request
    client = TestClient(app)

    response = client.get("/students")
    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "STORAGE_UNAVAILABLE"

    for response in (
        client.get("/students/1"),
        client.put("/students/1", json=SANJITH),
        client.delete("/students/1"),
    ):
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "STORAGE_UNAVAILABLE"


class TestIdOutsideStorableRange:
    """Ids beyond the 64-bit column range can never exist: 404, not 500."""

    TOO_LARGE = 2**63

    def test_get(self, client):
        response = client.get(f"/students/{self.TOO_LARGE}")
        assert response.status_code == 404
        assert response.content == b""

    def test_put(self, client):
        response = client.put(f"/students/{self.TOO_LARGE}", json=SANJITH)
        assert response.status_code == 404
        assert client.get("/students").json() == []

    def test_delete(self, client):
        response = client.delete(f"/students/{self.TOO_LARGE}")
        assert response.status_code == 404
        assert response.content == b""

    def test_negative(self, client):
        assert client.get(f"/students/{-(2**63) - 1}").status_code == 404


def test_update_malformed_json(client):
    created = client.post("/students", json=ARUN).json()
    response = client.put(
        f"/students/{created['id']}",
        content=b'{"name": "Sanjith"',
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert client.get(f"/students/{created['id']}").json() == created
