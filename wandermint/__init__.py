"""Trip document normalization and flexible-cost models.

Turns raw, schema-drifted trip documents into validated models and rolls
their costs up by category.
"""

from wandermint.costs import rollup_itinerary, rollup_trip, summarize_costs
from wandermint.parsing import (
    TripBatch,
    TripParseOutcome,
    TripParseResult,
    parse_trip,
    parse_trip_or_raise,
    parse_trips,
)
from wandermint.serialization import trip_to_document

__all__ = [
    "TripBatch",
    "TripParseOutcome",
    "TripParseResult",
    "parse_trip",
    "parse_trip_or_raise",
    "parse_trips",
    "rollup_itinerary",
    "rollup_trip",
    "summarize_costs",
    "trip_to_document",
]
