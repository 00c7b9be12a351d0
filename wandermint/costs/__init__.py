"""Cost rollups over parsed itineraries."""

from wandermint.costs.rollup import rollup_itinerary, rollup_trip, summarize_costs

__all__ = ["rollup_itinerary", "rollup_trip", "summarize_costs"]
