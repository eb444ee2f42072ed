import json
from datetime import date

import pytest

import journi.services.itinerary_generator as gen_mod
from journi.schemas.candidates import FlightCandidate, HotelCandidate, Preferences
from journi.services.itinerary_generator import ItineraryGenerationError, build_prompt, itinerary_generator

DATES = [date(2026, 5, 1), date(2026, 5, 2), date(2026, 5, 3)]


def test_prompt_contains_budget_breakdown():
    prompt = build_prompt(
        "Lisbon",
        DATES,
        Preferences(budget=1500, vibe="cultural", food=["seafood", "vegan"]),
        FlightCandidate(airline="TAP", price=400),
        HotelCandidate(name="Casa Azul", price_per_night=100),
    )
    assert "trip to Lisbon from 2026-05-01 to 2026-05-03 (3 days)" in prompt
    assert "TOTAL BUDGET: $1,500 (STRICT - DO NOT EXCEED)" in prompt
    assert "Selected flight: TAP, $400" in prompt
    assert "Casa Azul, $100/night for 3 nights = $300" in prompt
    assert "Remaining for activities/food: $800" in prompt
    assert "Food preferences: seafood, vegan" in prompt
    assert "Pace: medium" in prompt


def test_prompt_without_budget_or_selection():
    prompt = build_prompt("Oslo", DATES[:1], Preferences())
    assert "TOTAL BUDGET: flexible" in prompt
    assert "BUDGET BREAKDOWN" not in prompt
    assert "Selected flight" not in prompt
    assert "Trip vibe: leisure" in prompt


def test_generate_parses_reply(asyncio_event_loop, monkeypatch):
    reply = {
        "itinerary": [{"day": 1, "date": "2026-05-01", "morning": "Tram 28"}, "junk"],
        "summary": "Three days of tiles and pastries.",
        "estimated_total_cost": "1420",
    }

    async def complete(**kwargs):
        return json.dumps(reply)

    monkeypatch.setattr(gen_mod.llm_client, "complete", complete)

    result = asyncio_event_loop.run_until_complete(
        itinerary_generator.generate("Lisbon", DATES, Preferences(budget=1500))
    )

    assert result.itinerary == [{"day": 1, "date": "2026-05-01", "morning": "Tram 28"}]
    assert result.summary == "Three days of tiles and pastries."
    assert result.estimated_total_cost == 1420.0


def test_generate_defaults_missing_keys(asyncio_event_loop, monkeypatch):
    async def complete(**kwargs):
        return "{}"

    monkeypatch.setattr(gen_mod.llm_client, "complete", complete)

    result = asyncio_event_loop.run_until_complete(
        itinerary_generator.generate("Lisbon", DATES, Preferences())
    )
    assert result.itinerary == []
    assert result.summary == ""
    assert result.estimated_total_cost == 0


@pytest.mark.parametrize("reply", ["nope", "[]"])
def test_generate_rejects_unusable_reply(asyncio_event_loop, monkeypatch, reply):
    async def complete(**kwargs):
        return reply

    monkeypatch.setattr(gen_mod.llm_client, "complete", complete)

    with pytest.raises(ItineraryGenerationError):
        asyncio_event_loop.run_until_complete(
            itinerary_generator.generate("Lisbon", DATES, Preferences())
        )


def test_generate_wraps_llm_failure(asyncio_event_loop, monkeypatch):
    async def complete(**kwargs):
        raise RuntimeError("All LLM providers failed: no provider configured")

    monkeypatch.setattr(gen_mod.llm_client, "complete", complete)

    with pytest.raises(ItineraryGenerationError):
        asyncio_event_loop.run_until_complete(
            itinerary_generator.generate("Lisbon", DATES, Preferences())
        )
