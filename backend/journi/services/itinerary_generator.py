"""Itinerary generator — asks the LLM for a day-by-day plan that fits the budget.

The model is told the budget breakdown (flight, hotel, what is left for
activities) and asked to keep estimated_total_cost under the total. Nothing
here checks that it did: the reply is parsed and returned as-is.
"""

import json
import logging
from datetime import date

from pydantic import ValidationError

from journi.config import settings
from journi.data.currency import format_price
from journi.schemas.candidates import FlightCandidate, HotelCandidate, Preferences
from journi.schemas.itinerary import ItineraryResult
from journi.services.llm_client import llm_client
from journi.services.vision_parser import strip_code_fences

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional travel planner who ALWAYS respects budget constraints. "
    "Create detailed, realistic itineraries in JSON format that NEVER exceed the specified budget."
)


class ItineraryGenerationError(Exception):
    """The LLM did not produce a usable itinerary."""


def build_prompt(
    destination: str,
    dates: list[date],
    preferences: Preferences,
    selected_flight: FlightCandidate | None = None,
    selected_hotel: HotelCandidate | None = None,
) -> str:
    """Render the user prompt, including the budget breakdown when a budget is set."""
    start, end = dates[0].isoformat(), dates[-1].isoformat()
    num_days = len(dates)

    flight_cost = selected_flight.price if selected_flight else 0.0
    hotel_cost = selected_hotel.price_per_night * num_days if selected_hotel else 0.0

    lines = [
        f"Create a detailed daily travel itinerary for a trip to {destination} "
        f"from {start} to {end} ({num_days} days).",
        "",
        "User preferences:",
    ]
    if preferences.budget:
        lines.append(f"- TOTAL BUDGET: {format_price(preferences.budget)} (STRICT - DO NOT EXCEED)")
    else:
        lines.append("- TOTAL BUDGET: flexible")
    lines += [
        f"- Trip vibe: {preferences.vibe or 'leisure'}",
        f"- Purpose: {preferences.purpose or 'leisure'}",
        f"- Food preferences: {', '.join(preferences.food) if preferences.food else 'flexible'}",
        f"- Pace: {preferences.pace or 'medium'}",
        "",
    ]

    if selected_flight:
        lines.append(f"Selected flight: {selected_flight.airline}, {format_price(selected_flight.price)}")
    if selected_hotel:
        lines.append(
            f"Selected hotel: {selected_hotel.name}, {format_price(selected_hotel.price_per_night)}/night "
            f"for {num_days} nights = {format_price(hotel_cost)}"
        )

    if preferences.budget:
        remaining = preferences.budget - flight_cost - hotel_cost
        budget = format_price(preferences.budget)
        lines += [
            "",
            "BUDGET BREAKDOWN:",
            f"- Flight cost: {format_price(flight_cost)}",
            f"- Hotel cost: {format_price(hotel_cost)}",
            f"- Remaining for activities/food: {format_price(remaining)}",
            f"- TOTAL MUST NOT EXCEED: {budget}",
            "",
            f"IMPORTANT: The estimated_total_cost in your response MUST be less than or equal to {budget}.",
            "Calculate daily costs carefully to stay within budget. Include flight and hotel costs in the total.",
        ]

    example = {
        "itinerary": [
            {
                "day": 1,
                "date": start,
                "morning": "Activity description",
                "afternoon": "Activity description",
                "evening": "Activity description",
                "estimated_cost": 150,
            }
        ],
        "summary": "A brief 2-3 sentence overview of the trip",
        "estimated_total_cost": 0,
    }
    lines += [
        "",
        "Return ONLY valid JSON with this exact structure:",
        json.dumps(example, indent=2),
        "",
        "Make the itinerary engaging, realistic, and aligned with the user's preferences"
        + (f" while STRICTLY staying within the {format_price(preferences.budget)} budget." if preferences.budget else "."),
    ]
    return "\n".join(lines)


class ItineraryGenerator:
    """Builds the budget-aware prompt and parses the model's JSON reply."""

    async def generate(
        self,
        destination: str,
        dates: list[date],
        preferences: Preferences,
        selected_flight: FlightCandidate | None = None,
        selected_hotel: HotelCandidate | None = None,
    ) -> ItineraryResult:
        prompt = build_prompt(destination, dates, preferences, selected_flight, selected_hotel)

        raw = ""
        try:
            raw = await llm_client.complete(
                system=SYSTEM_PROMPT,
                user=prompt,
                max_tokens=settings.itinerary_max_tokens,
                temperature=0.7,
                json_mode=True,
            )
            parsed = json.loads(strip_code_fences(raw))
            if not isinstance(parsed, dict):
                raise ValueError("Itinerary reply is not a JSON object")
            result = ItineraryResult.model_validate(parsed)
        except json.JSONDecodeError as e:
            logger.warning(f"Itinerary: invalid JSON response: {e}\nRaw: {raw[:500]}")
            raise ItineraryGenerationError("Failed to generate itinerary") from e
        except (ValueError, ValidationError) as e:
            logger.warning(f"Itinerary: unusable response: {e}")
            raise ItineraryGenerationError("Failed to generate itinerary") from e
        except Exception as e:
            logger.error(f"Itinerary: LLM error: {e}")
            raise ItineraryGenerationError("Failed to generate itinerary") from e

        logger.info(
            f"Itinerary for {destination}: {len(result.itinerary)} days, "
            f"estimated ${result.estimated_total_cost:,.0f}"
        )
        return result


itinerary_generator = ItineraryGenerator()
