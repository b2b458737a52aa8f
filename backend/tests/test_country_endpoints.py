from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from nationforge_backend.api.dependencies import get_country_store
from nationforge_backend.game_logic import CountryStoreError, InMemoryCountryStore

if TYPE_CHECKING:
    from fastapi.testclient import TestClient

    from nationforge_backend.shared import FixedClock


class FailingCountryStore(InMemoryCountryStore):
    """Store whose reads fail as if the database were unreachable."""

    def get_by_owner(self, owner_id):
        msg = "connection lost"
        raise CountryStoreError(msg)


@pytest.fixture
def created_country(client: TestClient, auth_headers, country_payload) -> dict:
    response = client.post("/countries", json=country_payload(), headers=auth_headers)
    assert response.status_code == 201
    return response.json()


def test_create_country_seeds_defaults(
    client: TestClient, auth_headers, country_payload
) -> None:
    response = client.post("/countries", json=country_payload(), headers=auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Avalon"
    assert data["government"] == "Democracy"
    assert data["values"] == ["Freedom", "Justice"]
    assert data["flag"] == {
        "backgroundColor": "#3B82F6",
        "pattern": "stripe",
        "patternColor": "#FFFFFF",
    }
    assert data["resources"] == {
        "population": 1000,
        "economy": 10_000,
        "environment": 100,
    }
    assert data["buildings"] == []
    assert data["constructionQueue"] == []
    assert "lastResourceUpdate" in data

    profile = client.get("/users/profile", headers=auth_headers).json()
    assert profile["hasCountry"] is True
    assert data["ownerId"] == profile["id"]


def test_create_country_requires_token(client: TestClient, country_payload) -> None:
    assert client.post("/countries", json=country_payload()).status_code == 401


def test_user_may_only_found_one_country(
    client: TestClient, auth_headers, country_payload, created_country
) -> None:
    response = client.post(
        "/countries", json=country_payload(name="Elsewhere"), headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "User already has a country"


def test_country_names_are_unique(
    client: TestClient, register, country_payload, created_country
) -> None:
    other = register("Rival", "rival@example.com")

    response = client.post("/countries", json=country_payload(), headers=other)

    assert response.status_code == 400
    assert response.json()["detail"] == "Country name already exists"


@pytest.mark.parametrize(
    "overrides",
    [
        {"values": []},
        {"values": ["Freedom", "Justice", "Honor", "Power"]},
        {"values": ["Freedom", "Freedom"]},
        {"values": ["Chaos"]},
        {"government": "Anarchy"},
        {"name": "   "},
    ],
)
def test_create_country_validates_payload(
    client: TestClient, auth_headers, country_payload, overrides
) -> None:
    response = client.post(
        "/countries", json=country_payload(**overrides), headers=auth_headers
    )

    assert response.status_code == 422


def test_my_country_missing(client: TestClient, auth_headers) -> None:
    response = client.get("/countries/my-country", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Country not found"


def test_my_country_advances_resources(
    client: TestClient, auth_headers, clock: FixedClock, created_country
) -> None:
    clock.advance(timedelta(hours=1))

    response = client.get("/countries/my-country", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["resources"] == {
        "population": 1010,
        "economy": 10_100,
        "environment": 100,
    }


def test_my_country_is_throttled(
    client: TestClient, auth_headers, clock: FixedClock, created_country
) -> None:
    clock.advance(timedelta(minutes=5))

    data = client.get("/countries/my-country", headers=auth_headers).json()

    assert data["resources"] == created_country["resources"]
    assert data["lastResourceUpdate"] == created_country["lastResourceUpdate"]


def test_production_reports_base_rates(
    client: TestClient, auth_headers, created_country
) -> None:
    response = client.get("/countries/production", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"population": 10, "economy": 100, "environment": 0}


def test_production_requires_country(client: TestClient, auth_headers) -> None:
    assert client.get("/countries/production", headers=auth_headers).status_code == 404


def test_update_flag(client: TestClient, auth_headers, created_country) -> None:
    flag = {"backgroundColor": "#000000", "pattern": "cross", "patternColor": "#FFD700"}

    response = client.patch(
        f"/countries/{created_country['id']}",
        json={"flag": flag},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["flag"] == flag
    mine = client.get("/countries/my-country", headers=auth_headers).json()
    assert mine["flag"] == flag


def test_update_rejects_other_fields(
    client: TestClient, auth_headers, created_country
) -> None:
    response = client.patch(
        f"/countries/{created_country['id']}",
        json={"name": "Renamed"},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid updates"


def test_update_validates_flag(
    client: TestClient, auth_headers, created_country
) -> None:
    response = client.patch(
        f"/countries/{created_country['id']}",
        json={"flag": {"backgroundColor": "blue", "pattern": "stripe"}},
        headers=auth_headers,
    )

    assert response.status_code == 422


def test_update_foreign_country_not_found(
    client: TestClient, register, created_country
) -> None:
    other = register("Rival", "rival@example.com")
    flag = {"backgroundColor": "#000000", "pattern": "solid", "patternColor": "#000000"}

    response = client.patch(
        f"/countries/{created_country['id']}", json={"flag": flag}, headers=other
    )

    assert response.status_code == 404


def test_delete_country(client: TestClient, auth_headers, created_country) -> None:
    response = client.delete(
        f"/countries/{created_country['id']}", headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json() == {"message": "Country deleted"}
    assert client.get("/countries/my-country", headers=auth_headers).status_code == 404
    profile = client.get("/users/profile", headers=auth_headers).json()
    assert profile["hasCountry"] is False


def test_delete_unknown_country(client: TestClient, auth_headers) -> None:
    response = client.delete(f"/countries/{uuid4()}", headers=auth_headers)

    assert response.status_code == 404


def test_storage_failure_is_reported_as_server_error(
    app, client: TestClient, auth_headers
) -> None:
    app.dependency_overrides[get_country_store] = FailingCountryStore

    response = client.get("/countries/my-country", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
