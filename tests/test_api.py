from datetime import datetime, timezone

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from tourbook.deps import SessionDep, get_booking_service
from tourbook.infrastructure.repositories import BookingRepository
from tourbook.main import create_app
from tourbook.services import BookingService


VALID_BOOKING = {
    "tour_id": "tour-1",
    "customer_name": "Ana",
    "customer_email": "a@x.com",
    "seats": 2,
}


def test_list_tours_returns_seeded_catalog(client):
    response = client.get("/api/tours")

    assert response.status_code == 200
    tours = response.json()
    assert [t["id"] for t in tours] == ["tour-1", "tour-2", "tour-3"]
    assert tours[0] == {
        "id": "tour-1",
        "title": "Old Town Walking Tour",
        "description": "Cobbled lanes, hidden courtyards and the story of the city walls.",
        "price": 30,
        "duration_days": 1.0,
        "available": True,
    }


def test_get_tour(client):
    response = client.get("/api/tours/tour-3")

    assert response.status_code == 200
    assert response.json()["id"] == "tour-3"


def test_get_unknown_tour_is_404(client):
    response = client.get("/api/tours/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "Not found"


def test_create_booking(client):
    before = datetime.now(timezone.utc)

    response = client.post("/api/bookings", json=VALID_BOOKING)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == "booking-1"
    assert body["tour"]["id"] == "tour-1"
    assert body["tour"]["price"] == 30
    assert datetime.fromisoformat(body["created_at"]) >= before

    listing = client.get("/api/bookings").json()
    assert listing[0]["id"] == "booking-1"
    assert listing[0]["tour_id"] == "tour-1"
    assert listing[0]["seats"] == 2
    assert listing[0]["customer_email"] == "a@x.com"
    assert datetime.fromisoformat(listing[0]["created_at"]) >= before


def test_bookings_listed_newest_first(client):
    client.post("/api/bookings", json=VALID_BOOKING)
    client.post("/api/bookings", json={**VALID_BOOKING, "tour_id": "tour-2"})

    listing = client.get("/api/bookings").json()

    assert [b["id"] for b in listing] == ["booking-2", "booking-1"]


def test_missing_fields_is_400(client):
    for field in VALID_BOOKING:
        payload = {k: v for k, v in VALID_BOOKING.items() if k != field}

        response = client.post("/api/bookings", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing fields"

    assert client.get("/api/bookings").json() == []


def test_empty_body_is_missing_fields(client):
    response = client.post("/api/bookings")

    assert response.status_code == 400
    assert response.json()["error"] == "Missing fields"


def test_empty_customer_name_is_400(client):
    response = client.post("/api/bookings", json={**VALID_BOOKING, "customer_name": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing fields"


def test_unknown_tour_is_400(client):
    response = client.post("/api/bookings", json={**VALID_BOOKING, "tour_id": "does-not-exist"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid tour_id"
    assert client.get("/api/bookings").json() == []


def test_non_object_body_is_400(client):
    response = client.post("/api/bookings", json=["tour-1", "Ana"])

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request"


def test_storage_failure_is_500(settings):
    class FailingBookingRepository(BookingRepository):
        async def create(self, *, obj_in):
            raise OperationalError("INSERT INTO bookings", {}, Exception("database is locked"))

    def failing_service(sess: SessionDep) -> BookingService:
        return BookingService(sess, booking_repository=FailingBookingRepository(sess))

    app = create_app(settings)
    app.dependency_overrides[get_booking_service] = failing_service

    with TestClient(app) as client:
        response = client.post("/api/bookings", json=VALID_BOOKING)

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert client.get("/api/bookings").json() == []


def test_cors_allows_any_origin(client):
    response = client.get("/api/tours", headers={"Origin": "https://elsewhere.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_index_page_injects_api_base(settings):
    settings.API_BASE_URL = "https://api.example.com"

    with TestClient(create_app(settings)) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert 'window.TOURBOOK_API_BASE = "https://api.example.com";' in response.text


def test_static_assets_are_served(client):
    assert client.get("/static/app.js").status_code == 200
    assert client.get("/static/styles.css").status_code == 200


def test_healthz(client):
    assert client.get("/healthz").json() == {"db": "ok"}


def test_catalog_not_seeded_when_disabled(settings):
    settings.SEED_CATALOG = False

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/tours").json() == []


def test_rate_limit(settings):
    settings.RATE_LIMIT_DEFAULT = "2/minute"

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/tours").status_code == 200
        assert client.get("/api/tours").status_code == 200
        response = client.get("/api/tours")

    assert response.status_code == 429
    assert response.json()["error"] == "Too many requests"


def test_oversized_seat_count_is_400(client):
    response = client.post("/api/bookings", json={**VALID_BOOKING, "seats": 10**20})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing fields"
    assert client.get("/api/bookings").json() == []


def test_numeric_customer_name_is_accepted(client):
    response = client.post("/api/bookings", json={**VALID_BOOKING, "customer_name": 42})

    assert response.status_code == 201
    assert client.get("/api/bookings").json()[0]["customer_name"] == "42"
