"""Write parsed models back out in the current document shape.

The output is what the parsers read: destinations as a list, canonical
vocabulary tags, ISO-8601 instants, flights as a container of legs with
one segment each, and transport with ``type`` plus split date/time
fields. Parsing the result yields an equal model.
"""

from typing import Any

from pydantic import BaseModel

from wandermint.models.itinerary import (
    DailyPlan,
    DetailedItinerary,
    FlightDetails,
    FlightItinerary,
    LocalTransportation,
)
from wandermint.models.trip import Recommendation, Trip

Document = dict[str, Any]


def _dump(model: BaseModel) -> Document:
    return model.model_dump(by_alias=True, mode="json", exclude_none=True)


def transport_to_document(transport: LocalTransportation) -> Document:
    document = _dump(transport)
    document["type"] = document.pop("method")
    document["bookingInstructions"] = document.pop("instructions")
    return document


def _leg(flight: FlightDetails | None) -> Document:
    if flight is None or flight.is_placeholder:
        return {"segments": []}
    return {"segments": [_dump(flight)]}


def flights_to_document(flights: FlightItinerary) -> Document:
    """Container shape; empty slots are legs without segments."""
    legs = [_leg(flights.outbound), _leg(flights.return_flight)]
    legs.extend(_leg(flight) for flight in flights.additional_flights)
    while legs and not legs[-1]["segments"]:
        legs.pop()

    return {
        "allFlights": legs,
        "bookingDeadline": flights.booking_deadline,
        "bookingInstructions": flights.booking_instructions,
    }


def daily_plan_to_document(plan: DailyPlan) -> Document:
    document = _dump(plan)
    document["transportation"] = [transport_to_document(t) for t in plan.transportation]
    return document


def itinerary_to_document(itinerary: DetailedItinerary) -> Document:
    document = _dump(itinerary)
    document.pop("majorTransportation", None)
    document["flights"] = flights_to_document(itinerary.flights)
    document["dailyPlans"] = [daily_plan_to_document(plan) for plan in itinerary.daily_plans]
    if itinerary.major_transportation is not None:
        document["transportation"] = [
            transport_to_document(t) for t in itinerary.major_transportation
        ]
    return document


def recommendation_to_document(recommendation: Recommendation) -> Document:
    document = _dump(recommendation)
    if recommendation.itinerary is not None:
        document["itinerary"] = itinerary_to_document(recommendation.itinerary)
    return document


def trip_to_document(trip: Trip) -> Document:
    """Serialize a trip to a raw document that ``parse_trip`` accepts."""
    document = _dump(trip)
    if trip.recommendation is not None:
        document["recommendation"] = recommendation_to_document(trip.recommendation)
    return document
