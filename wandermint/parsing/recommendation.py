"""Recommendation parsing, including the legacy flat suggestion lists."""

from wandermint.config import get_settings
from wandermint.models.cost import CostBreakdown
from wandermint.models.trip import (
    Accommodation,
    Activity,
    FlightInfo,
    Recommendation,
    TransportationSummary,
)
from wandermint.parsing.context import Fragment, ParseContext, parse_items, parse_optional
from wandermint.parsing.costs import parse_cost_breakdown
from wandermint.parsing.fields import (
    optional_float,
    optional_instant,
    optional_int,
    optional_mapping,
    require_str,
    require_str_list,
    str_list,
    text,
)
from wandermint.parsing.itinerary import parse_detailed_itinerary


def parse_legacy_activity(fragment: Fragment, ctx: ParseContext) -> Activity:
    return Activity(
        id=require_str(fragment, "id", ctx),
        name=require_str(fragment, "name", ctx),
        description=text(fragment, "description", ctx),
        category=text(fragment, "category", ctx),
        estimated_duration=text(fragment, "estimatedDuration", ctx),
        estimated_cost=optional_float(fragment, "estimatedCost", ctx) or 0.0,
        priority=optional_int(fragment, "priority", ctx, 3),
    )


def parse_legacy_accommodation(fragment: Fragment, ctx: ParseContext) -> Accommodation:
    return Accommodation(
        id=require_str(fragment, "id", ctx),
        name=require_str(fragment, "name", ctx),
        type=text(fragment, "type", ctx),
        description=text(fragment, "description", ctx),
        price_range=text(fragment, "priceRange", ctx),
        rating=optional_float(fragment, "rating", ctx) or 0.0,
        amenities=str_list(fragment, "amenities", ctx),
    )


def parse_flight_info(fragment: Fragment, ctx: ParseContext) -> FlightInfo:
    return FlightInfo(
        recommended_airlines=require_str_list(fragment, "recommendedAirlines", ctx),
        estimated_flight_time=require_str(fragment, "estimatedFlightTime", ctx),
        best_booking_time=require_str(fragment, "bestBookingTime", ctx),
    )


def parse_transportation_summary(fragment: Fragment, ctx: ParseContext) -> TransportationSummary:
    return TransportationSummary(
        flight_info=parse_optional(
            parse_flight_info, fragment.get("flightInfo"), ctx.child("flightInfo"), "flight_info"
        ),
        local_transport=str_list(fragment, "localTransport", ctx),
        estimated_flight_cost=optional_float(fragment, "estimatedFlightCost", ctx) or 0.0,
        local_transport_cost=optional_float(fragment, "localTransportCost", ctx) or 0.0,
    )


def _estimated_cost(fragment: Fragment, ctx: ParseContext) -> CostBreakdown:
    raw = optional_mapping(fragment, "estimatedCost")
    if raw is None:
        return CostBreakdown(currency=get_settings().default_currency)
    return parse_cost_breakdown(raw, ctx.child("estimatedCost"))


def parse_recommendation(fragment: Fragment, ctx: ParseContext) -> Recommendation:
    """Parse a consultant recommendation.

    The detailed itinerary and the legacy transportation summary are
    optional structures: a malformed one is dropped, not propagated.

    Raises:
        MissingFieldError: ``id``, ``destination`` or ``overview`` is absent
    """
    return Recommendation(
        id=require_str(fragment, "id", ctx),
        destination_name=require_str(fragment, "destination", ctx),
        overview=require_str(fragment, "overview", ctx),
        itinerary=parse_optional(
            parse_detailed_itinerary, fragment.get("itinerary"), ctx.child("itinerary"), "itinerary"
        ),
        activities=parse_items(
            parse_legacy_activity, fragment.get("activities"), ctx.child("activities"), "activities"
        ),
        accommodations=parse_items(
            parse_legacy_accommodation,
            fragment.get("accommodations"),
            ctx.child("accommodations"),
            "accommodations",
        ),
        transportation=parse_optional(
            parse_transportation_summary,
            fragment.get("transportation"),
            ctx.child("transportation"),
            "transportation",
        ),
        estimated_cost=_estimated_cost(fragment, ctx),
        best_time_to_visit=text(fragment, "bestTimeToVisit", ctx),
        tips=str_list(fragment, "tips", ctx),
        created_at=optional_instant(fragment, "createdAt", ctx),
    )
