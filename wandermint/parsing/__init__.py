"""Parsers turning raw trip documents into typed models."""

from wandermint.parsing.context import (
    Diagnostic,
    DiagnosticKind,
    ParseContext,
    parse_items,
    parse_optional,
)
from wandermint.parsing.costs import parse_cost_breakdown, parse_flexible_cost
from wandermint.parsing.flights import parse_flight_details, parse_flight_itinerary
from wandermint.parsing.itinerary import (
    parse_accommodation_details,
    parse_booking_instructions,
    parse_daily_activity,
    parse_daily_plan,
    parse_detailed_itinerary,
    parse_emergency_info,
    parse_meal,
)
from wandermint.parsing.recommendation import parse_recommendation
from wandermint.parsing.transport import parse_local_transportation
from wandermint.parsing.trip import (
    TripBatch,
    TripParseOutcome,
    TripParseResult,
    parse_trip,
    parse_trip_or_raise,
    parse_trips,
)

__all__ = [
    # Context
    "Diagnostic",
    "DiagnosticKind",
    "ParseContext",
    "parse_items",
    "parse_optional",
    # Entities
    "parse_accommodation_details",
    "parse_booking_instructions",
    "parse_cost_breakdown",
    "parse_daily_activity",
    "parse_daily_plan",
    "parse_detailed_itinerary",
    "parse_emergency_info",
    "parse_flexible_cost",
    "parse_flight_details",
    "parse_flight_itinerary",
    "parse_local_transportation",
    "parse_meal",
    "parse_recommendation",
    # Assembler
    "TripBatch",
    "TripParseOutcome",
    "TripParseResult",
    "parse_trip",
    "parse_trip_or_raise",
    "parse_trips",
]
