# tests/conftest.py
import asyncio
import os
import sys

import pytest

BACKEND = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND not in sys.path:
    sys.path.insert(0, BACKEND)

# Keep the LLM client offline regardless of the developer's .env
os.environ["OPENAI_API_KEY"] = ""
os.environ["ANTHROPIC_API_KEY"] = ""

from journi.schemas.candidates import FlightCandidate, HotelCandidate


@pytest.fixture
def asyncio_event_loop():
    loop = asyncio.new_event_loop()
    try:
        yield loop
    finally:
        loop.close()


@pytest.fixture
def flight_a():
    return FlightCandidate(airline="Alpha Air", price=100, duration="2h", stopovers=0)


@pytest.fixture
def flight_b():
    return FlightCandidate(airline="Beta Jet", price=200, duration="4h", stopovers=1)


@pytest.fixture
def downtown_inn():
    return HotelCandidate(name="H1", price_per_night=100, rating=4, location="Downtown Inn")
