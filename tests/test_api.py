from io import BytesIO
import openpyxl
import pytest
from fastapi.testclient import TestClient
from dependencies import get_archive_store, get_booking_store, get_contractor_store
from main import XLSX_MEDIA_TYPE, app
from stores import InMemoryArchiveStore, InMemoryBookingStore, InMemoryContractorStore
from stores.sql import SqlBookingStore


API_SECRET = "test-secret"
HEADERS = {"Authorization": f"Bearer {API_SECRET}"}


@pytest.fixture
def booking_store():
    return InMemoryBookingStore()


@pytest.fixture
def client(monkeypatch, booking_store):
    monkeypatch.setenv("API_SECRET", API_SECRET)
    archive_store = InMemoryArchiveStore()
    contractor_store = InMemoryContractorStore()
    app.dependency_overrides[get_booking_store] = lambda: booking_store
    app.dependency_overrides[get_archive_store] = lambda: archive_store
    app.dependency_overrides[get_contractor_store] = lambda: contractor_store
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_batch(requested_count: int = 2, date_to: str = "2024-06-16") -> dict:
    return {
        "date_from": "2024-06-03",
        "date_to": date_to,
        "weekday_patterns": [
            {"weekday": 1, "start_time": "17:00", "end_time": "18:00", "requested_count": requested_count},
        ],
        "occupant_label": "AZS",
        "category": "Running group",
    }


def test_root_is_public(client):
    # Act
    response = client.get("/")

    # Assert
    assert response.status_code == 200


def test_requires_bearer_token(client):
    # Act
    missing = client.get("/facilities")
    wrong = client.get("/facilities", headers={"Authorization": "Bearer nope"})

    # Assert
    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_missing_api_secret(client, monkeypatch):
    # Arrange
    monkeypatch.delenv("API_SECRET")

    # Act
    response = client.get("/facilities", headers=HEADERS)

    # Assert
    assert response.status_code == 500


def test_list_facilities(client):
    # Act
    response = client.get("/facilities", headers=HEADERS)

    # Assert
    assert response.status_code == 200
    assert [facility["id"] for facility in response.json()] == ["track-6", "track-8", "rugby"]


def test_batch_accepted_then_rejected(client):
    # Act
    accepted = client.post("/facilities/track-6/bookings/batch", json=make_batch(4), headers=HEADERS)
    rejected = client.post("/facilities/track-6/bookings/batch", json=make_batch(3), headers=HEADERS)

    # Assert
    assert accepted.status_code == 200
    assert accepted.json()["result"] == "accepted"
    assert [booking["sections"] for booking in accepted.json()["bookings"]] == [[1, 2, 3, 4], [1, 2, 3, 4]]

    assert rejected.status_code == 200
    assert rejected.json()["result"] == "rejected"
    assert rejected.json()["conflict_count"] == 2
    assert rejected.json()["conflicts"][0] == (
        "03.06.2024 17:00-18:00: not enough free tracks (requested 3, available 2)"
    )

    bookings = client.get("/facilities/track-6/bookings", params={"date": "2024-06-10"}, headers=HEADERS)
    assert len(bookings.json()) == 1


def test_invalid_batch_is_unprocessable(client):
    # Arrange
    payload = make_batch()
    payload["date_to"] = "2024-06-01"

    # Act
    response = client.post("/facilities/track-6/bookings/batch", json=payload, headers=HEADERS)
    unknown_facility = client.post("/facilities/tennis/bookings/batch", json=make_batch(), headers=HEADERS)

    # Assert
    assert response.status_code == 422
    assert "date_from" in response.json()["detail"]
    assert unknown_facility.status_code == 422


def test_availability(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1, 2]))

    # Act
    response = client.post(
        "/facilities/track-6/availability",
        json={
            "date": "2024-06-03",
            "start_time": "09:00",
            "end_time": "10:00",
            "requested_count": 3,
            "consecutive": True,
        },
        headers=HEADERS,
    )

    # Assert
    assert response.status_code == 200
    assert response.json() == {"sections": [3, 4, 5], "free_sections": [3, 4, 5, 6]}


def test_delete_booking(client, booking_store, make_booking):
    # Arrange
    booking = booking_store.create(make_booking(sections=[1]))

    # Act
    deleted = client.delete(f"/bookings/{booking.id}", headers=HEADERS)
    missing = client.delete(f"/bookings/{booking.id}", headers=HEADERS)

    # Assert
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_delete_all_bookings(client, booking_store, make_booking):
    # Arrange
    booking_store.create_many([make_booking(sections=[1]), make_booking(sections=[2])])

    # Act
    response = client.delete("/facilities/track-6/bookings", headers=HEADERS)

    # Assert
    assert response.json() == {"deleted_count": 2}


def test_reorganize(client, booking_store, make_booking):
    # Arrange
    booking = booking_store.create(make_booking(sections=[5, 6]))

    # Act
    response = client.post("/facilities/track-6/reorganize", headers=HEADERS)

    # Assert
    assert response.json()["updated_count"] == 1
    assert booking_store.get(booking.id).sections == [1, 2]


def test_week_grid(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1, 2]))

    # Act
    response = client.get("/facilities/track-6/week", params={"week_start": "2024-06-05"}, headers=HEADERS)

    # Assert
    grid = response.json()
    assert grid["week_start"] == "2024-06-03"
    assert len(grid["blocks"]) == 1
    assert grid["blocks"][0]["col_span"] == 2
    assert grid["blocks"][0]["row_span"] == 2


def test_week_export(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1, 2]))

    # Act
    response = client.post(
        "/facilities/track-6/week/export",
        json={"week_start": "2024-06-03", "anonymized": True},
        headers=HEADERS,
    )

    # Assert
    assert response.status_code == 200
    assert response.headers["content-type"] == XLSX_MEDIA_TYPE
    assert "_anonymized.xlsx" in response.headers["content-disposition"]


def test_archive_lifecycle(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1]))

    # Act
    saved = client.post("/facilities/track-6/archives", params={"week_start": "2024-06-04"}, headers=HEADERS)
    listed = client.get("/archives", params={"facility_type": "track-6"}, headers=HEADERS)
    exported = client.get("/archives/export", headers=HEADERS)
    deleted = client.delete(f"/archives/{saved.json()['id']}", headers=HEADERS)
    missing = client.delete(f"/archives/{saved.json()['id']}", headers=HEADERS)

    # Assert
    assert saved.status_code == 200
    assert saved.json()["week_start"] == "2024-06-03"
    assert [archive["id"] for archive in listed.json()] == [saved.json()["id"]]
    assert exported.headers["content-type"] == XLSX_MEDIA_TYPE
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_update_booking(client, booking_store, make_booking):
    # Arrange
    booking = booking_store.create(make_booking(sections=[1]))

    # Act
    response = client.patch(f"/bookings/{booking.id}", json={"category": "Running group"}, headers=HEADERS)
    missing = client.patch("/bookings/missing", json={"category": "Running group"}, headers=HEADERS)

    # Assert
    assert response.status_code == 200
    assert response.json()["category"] == "Running group"
    assert response.json()["occupant_label"] == "OKS SKRA"
    assert missing.status_code == 404


def test_week_export_rejects_invalid_colors(client):
    # Act
    response = client.post(
        "/facilities/track-6/week/export",
        json={"week_start": "2024-06-03", "color_map": {"AZS": "blue"}},
        headers=HEADERS,
    )

    # Assert
    assert response.status_code == 422


def test_all_routes_are_registered():
    # Arrange
    paths = {route.path for route in app.routes}

    # Assert
    assert {
        "/facilities/{facility_type}/bookings/batch",
        "/facilities/{facility_type}/week/export",
        "/archives/{archive_id}/export",
        "/contractors",
        "/contractors/{contractor_id}",
    } <= paths


def test_contractor_lifecycle(client):
    # Act
    created = client.post("/contractors", json={"name": "AZS", "color": "#93c5fd"}, headers=HEADERS)
    duplicate = client.post("/contractors", json={"name": "azs", "color": "#FCA5A5"}, headers=HEADERS)
    contractor_id = created.json()["id"]
    updated = client.patch(f"/contractors/{contractor_id}", json={"color": "#FDE68A"}, headers=HEADERS)
    listed = client.get("/contractors", headers=HEADERS)
    deleted = client.delete(f"/contractors/{contractor_id}", headers=HEADERS)
    missing = client.patch(f"/contractors/{contractor_id}", json={"color": "#FDE68A"}, headers=HEADERS)

    # Assert
    assert created.status_code == 201
    assert created.json()["color"] == "#93C5FD"
    assert duplicate.status_code == 422
    assert updated.json()["color"] == "#FDE68A"
    assert [contractor["name"] for contractor in listed.json()] == ["AZS"]
    assert deleted.status_code == 204
    assert missing.status_code == 404


def test_week_export_uses_contractor_colors(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1, 2]))
    client.post("/contractors", json={"name": "OKS SKRA", "color": "#FCA5A5"}, headers=HEADERS)

    # Act
    response = client.post("/facilities/track-6/week/export", json={"week_start": "2024-06-03"}, headers=HEADERS)

    # Assert
    worksheet = openpyxl.load_workbook(BytesIO(response.content))["Schedule"]
    assert worksheet["B8"].fill.start_color.rgb.endswith("FCA5A5")


def test_archived_week_export(client, booking_store, make_booking):
    # Arrange
    booking_store.create(make_booking(sections=[1, 2]))
    saved = client.post("/facilities/track-6/archives", params={"week_start": "2024-06-03"}, headers=HEADERS)

    # Act
    response = client.get(
        f"/archives/{saved.json()['id']}/export", params={"anonymized": True}, headers=HEADERS)
    missing = client.get("/archives/missing/export", headers=HEADERS)

    # Assert
    assert response.status_code == 200
    assert response.headers["content-type"] == XLSX_MEDIA_TYPE
    assert "_anonymized.xlsx" in response.headers["content-disposition"]
    worksheet = openpyxl.load_workbook(BytesIO(response.content))["Schedule"]
    assert worksheet["B8"].value is None
    assert missing.status_code == 404


def test_database_failure_is_service_unavailable(client, failing_session_factory):
    # Arrange
    sql_store = SqlBookingStore(failing_session_factory)
    app.dependency_overrides[get_booking_store] = lambda: sql_store

    # Act
    response = client.post("/facilities/track-6/bookings/batch", json=make_batch(2), headers=HEADERS)

    # Assert
    assert response.status_code == 503
    assert "Failed to create" in response.json()["detail"]
    assert sql_store.list() == []
