"""HTTP contract tests for the /api/users resource."""

from typing import Any

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlmodel import Session

from src.app.api.http.deps import get_db_session, get_user_service
from src.app.core.services import UserService

USERS = "/api/users"


class TestListUsers:
    def test_empty_list(self, client: TestClient):
        response = client.get(USERS)

        assert response.status_code == 200
        assert response.json() == []

    def test_lists_created_users(self, client: TestClient, create_user):
        first = create_user()
        second = create_user(firstname="Erika", email="erika@example.com")

        response = client.get(USERS)

        assert response.status_code == 200
        assert {user["id"] for user in response.json()} == {first["id"], second["id"]}


class TestGetUser:
    def test_unknown_id(self, client: TestClient):
        response = client.get(f"{USERS}/999")

        assert response.status_code == 404
        assert response.text == "There is no user with the ID 999."
        assert response.headers["content-type"].startswith("text/plain")

    def test_returns_stored_fields(
        self, client: TestClient, create_user, user_data: dict[str, Any]
    ):
        created = create_user()

        response = client.get(f"{USERS}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **user_data}

    def test_non_numeric_id(self, client: TestClient):
        response = client.get(f"{USERS}/abc")

        assert response.status_code == 400
        assert response.text.startswith("Validation errors: ")

    def test_id_beyond_storage_range(self, client: TestClient):
        response = client.get(f"{USERS}/{2**70}")

        assert response.status_code == 400
        assert response.text.startswith("Validation errors: user_id")


class TestCreateUser:
    def test_created(self, client: TestClient, user_data: dict[str, Any]):
        response = client.post(USERS, json=user_data)

        assert response.status_code == 201
        body = response.json()
        assert isinstance(body["id"], int)
        assert body["firstname"] == "Max"
        assert body["lastname"] == "Mustermann"
        assert body["email"] == "max.mustermann@example.com"
        assert body["birthday"] == "2000-01-01"

    def test_client_id_is_ignored(
        self, client: TestClient, create_user, user_data: dict[str, Any]
    ):
        existing = create_user()

        response = client.post(USERS, json={**user_data, "id": existing["id"]})

        assert response.status_code == 201
        assert response.json()["id"] != existing["id"]

    def test_missing_lastname(self, client: TestClient, user_data: dict[str, Any]):
        del user_data["lastname"]

        response = client.post(USERS, json=user_data)

        assert response.status_code == 400
        assert response.text == "Validation errors: lastname: must not be blank"
        assert client.get(USERS).json() == []

    def test_invalid_email(self, client: TestClient, user_data: dict[str, Any]):
        response = client.post(USERS, json={**user_data, "email": "max.mustermann"})

        assert response.status_code == 400
        assert "email: must be a well-formed email address" in response.text

    def test_multiple_violations_are_joined(self, client: TestClient):
        response = client.post(USERS, json={"email": "x"})

        assert response.status_code == 400
        assert response.text == (
            "Validation errors: firstname: must not be blank, "
            "lastname: must not be blank, "
            "email: must be a well-formed email address, "
            "password: must not be blank"
        )

    def test_malformed_birthday(self, client: TestClient, user_data: dict[str, Any]):
        response = client.post(USERS, json={**user_data, "birthday": "01.01.2000"})

        assert response.status_code == 400
        assert response.text.startswith("Validation errors: birthday")

    def test_invalid_json(self, client: TestClient):
        response = client.post(
            USERS, content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.text == "Validation errors: body: invalid JSON"

    def test_email_with_display_name(self, client: TestClient, user_data: dict[str, Any]):
        response = client.post(USERS, json={**user_data, "email": "Max <max@example.com>"})

        assert response.status_code == 400
        assert response.text == "Validation errors: email: must be a well-formed email address"
        assert client.get(USERS).json() == []


class TestUpdateUser:
    def test_overwrites_every_mutable_field(
        self, client: TestClient, create_user, updated_user_data: dict[str, Any]
    ):
        created = create_user()

        response = client.put(f"{USERS}/{created['id']}", json=updated_user_data)

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], **updated_user_data}
        stored = client.get(f"{USERS}/{created['id']}").json()
        assert stored == {"id": created["id"], **updated_user_data}

    def test_id_in_body_is_ignored(
        self, client: TestClient, create_user, updated_user_data: dict[str, Any]
    ):
        created = create_user()

        response = client.put(
            f"{USERS}/{created['id']}", json={**updated_user_data, "id": 12345}
        )

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]

    def test_unknown_id(self, client: TestClient, updated_user_data: dict[str, Any]):
        response = client.put(f"{USERS}/999", json=updated_user_data)

        assert response.status_code == 404
        assert response.text == "There is no user with the ID 999."

    def test_invalid_email_on_existing_user(
        self, client: TestClient, create_user, updated_user_data: dict[str, Any]
    ):
        created = create_user()

        response = client.put(
            f"{USERS}/{created['id']}",
            json={**updated_user_data, "email": "maria.musterfrau"},
        )

        assert response.status_code == 400
        assert client.get(f"{USERS}/{created['id']}").json()["firstname"] == "Max"

    def test_invalid_email_on_unknown_user(
        self, client: TestClient, updated_user_data: dict[str, Any]
    ):
        response = client.put(
            f"{USERS}/999", json={**updated_user_data, "email": "maria.musterfrau"}
        )

        assert response.status_code == 400

    def test_id_beyond_storage_range(
        self, client: TestClient, updated_user_data: dict[str, Any]
    ):
        response = client.put(f"{USERS}/{2**63}", json=updated_user_data)

        assert response.status_code == 400


class TestDeleteUser:
    def test_deleted(self, client: TestClient, create_user):
        created = create_user()

        response = client.delete(f"{USERS}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{USERS}/{created['id']}").status_code == 404

    def test_unknown_id(self, client: TestClient):
        response = client.delete(f"{USERS}/999")

        assert response.status_code == 404
        assert response.text == "There is no user with the ID 999."

    def test_repeated_delete(self, client: TestClient, create_user):
        created = create_user()
        assert client.delete(f"{USERS}/{created['id']}").status_code == 204

        response = client.delete(f"{USERS}/{created['id']}")

        assert response.status_code == 404
        assert response.text == f"There is no user with the ID {created['id']}."

    def test_only_target_is_removed(self, client: TestClient, create_user):
        kept = create_user()
        removed = create_user(email="other@example.com")

        client.delete(f"{USERS}/{removed['id']}")

        assert [user["id"] for user in client.get(USERS).json()] == [kept["id"]]

    def test_id_beyond_storage_range(self, client: TestClient, create_user):
        create_user()

        response = client.delete(f"{USERS}/{2**70}")

        assert response.status_code == 400
        assert len(client.get(USERS).json()) == 1


class FailingUserService(UserService):
    """Persists the record, then fails the way a broken database would."""

    def create(self, user):
        super().create(user)
        raise OperationalError("INSERT INTO users", {}, Exception("database is gone"))


def failing_user_service(db: Session = Depends(get_db_session)) -> UserService:
    return FailingUserService(db)


class TestPersistenceFailure:
    @pytest.fixture
    def failing_client(self, app: FastAPI, client: TestClient):
        app.dependency_overrides[get_user_service] = failing_user_service
        try:
            yield client
        finally:
            app.dependency_overrides.clear()

    def test_error_is_rolled_back_and_reported(
        self, failing_client: TestClient, user_data: dict[str, Any]
    ):
        response = failing_client.post(USERS, json=user_data)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal Server Error"
        assert "X-Request-ID" in response.headers
        assert failing_client.get(USERS).json() == []


class TestRequestContext:
    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get(USERS, headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client: TestClient):
        response = client.get(USERS)
        assert response.headers["X-Request-ID"]
