import json
from datetime import date
from decimal import Decimal

from journi.schemas.itinerary import ItineraryRequest, ItineraryResult
from journi.services.trip_service import trip_service


class FakeSession:
    def __init__(self):
        self.added = []
        self.commits = 0

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self.commits += 1


def test_create_trip_builds_rows(asyncio_event_loop):
    req = ItineraryRequest.model_validate({
        "destination": "Lisbon",
        "dates": ["2026-05-01", "2026-05-02", "2026-05-04"],
        "preferences": {"food": ["seafood"]},
        "flights": [{"airline": "TAP", "price": "412.80", "departTime": "08:10", "stopovers": "1 stop"}],
        "hotels": [{"name": "Casa Azul", "pricePerNight": "95.5", "rating": "4.4"}],
    })
    result = ItineraryResult(itinerary=[{"day": 1}], summary="Tiles.", estimated_total_cost=900)
    db = FakeSession()

    trip = asyncio_event_loop.run_until_complete(trip_service.create_trip(db, req, result))

    assert db.added == [trip] and db.commits == 1
    assert trip.start_date == date(2026, 5, 1)
    assert trip.end_date == date(2026, 5, 4)
    assert trip.budget == Decimal("0")
    assert trip.vibe == "leisure"

    flight = trip.flights[0]
    assert (flight.airline, flight.price, flight.depart_time, flight.stopovers) == ("TAP", 412, "08:10", 1)
    assert flight.arrive_time is None

    hotel = trip.hotels[0]
    assert (hotel.name, hotel.price_per_night, hotel.rating, hotel.location) == ("Casa Azul", 95, 4.4, "Unknown")

    assert trip.itinerary.json_data == {
        "itinerary": [{"day": 1}],
        "summary": "Tiles.",
        "estimated_total_cost": 900.0,
    }


def test_create_trip_stores_overflowing_price_as_zero(asyncio_event_loop):
    req = ItineraryRequest.model_validate(json.loads(
        '{"destination": "Oslo", "dates": ["2026-06-01"], "preferences": {},'
        ' "flights": [{"airline": "SAS", "price": 1e999}],'
        ' "hotels": [{"name": "Fjord", "price_per_night": 1e999, "rating": 1e999}]}'
    ))
    result = ItineraryResult(summary="Fjords.")

    trip = asyncio_event_loop.run_until_complete(trip_service.create_trip(FakeSession(), req, result))

    assert trip.flights[0].price == 0
    assert (trip.hotels[0].price_per_night, trip.hotels[0].rating) == (0, 0.0)
