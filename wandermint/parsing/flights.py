"""Flight itinerary parsing.

Legs are assigned by position: leg 0 is the outbound flight, leg 1 the
return, and every later leg goes to ``additional_flights``. Only the first
segment of a leg is read; layovers are summarized, not exploded.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from wandermint.config import get_settings
from wandermint.errors import DocumentParseError
from wandermint.models.cost import FlexibleCost
from wandermint.models.itinerary import FlightDetails, FlightItinerary, FlightSegment
from wandermint.parsing.context import Fragment, ParseContext, drop_structure, skip_item
from wandermint.parsing.costs import parse_cost_field
from wandermint.parsing.fields import optional_bool, optional_mapping, optional_str, text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegContext:
    """Leg-level values pushed down onto the leg's first segment."""

    booking_instructions: str | None = None
    is_booked: bool | None = None
    booking_reference: str | None = None
    booked_date: str | None = None
    seat_numbers: str | None = None

    @classmethod
    def from_leg(cls, leg: Fragment, ctx: ParseContext) -> "LegContext":
        return cls(
            booking_instructions=optional_str(leg, "bookingInstructions", ctx),
            is_booked=optional_bool(leg, "isBooked", ctx, None),
            booking_reference=optional_str(leg, "bookingReference", ctx),
            booked_date=optional_str(leg, "bookedDate", ctx),
            seat_numbers=optional_str(leg, "seatNumbers", ctx),
        )


def parse_flight_segment(fragment: Fragment, ctx: ParseContext) -> FlightSegment:
    return FlightSegment(
        airport=text(fragment, "airport", ctx),
        airport_code=text(fragment, "airportCode", ctx),
        city=text(fragment, "city", ctx),
        date=text(fragment, "date", ctx),
        time=text(fragment, "time", ctx),
        terminal=optional_str(fragment, "terminal", ctx),
        gate=optional_str(fragment, "gate", ctx),
    )


def _endpoint(fragment: Fragment, key: str, ctx: ParseContext) -> FlightSegment:
    raw = optional_mapping(fragment, key)
    if raw is None:
        return FlightSegment()
    return parse_flight_segment(raw, ctx.child(key))


def _override(leg_value: Any, segment_value: Any) -> Any:
    return segment_value if leg_value is None else leg_value


def parse_flight_details(
    fragment: Fragment,
    ctx: ParseContext,
    leg: LegContext | None = None,
) -> FlightDetails:
    """Parse one flight segment into FlightDetails.

    Booking tracking stored on the leg wins over the segment's own values;
    the leg's booking instructions only fill in when the segment has none.

    Raises:
        MissingFieldError: the segment's cost is a points/hybrid cost
            without points details
    """
    leg = leg or LegContext()
    settings = get_settings()

    segment_instructions = optional_str(fragment, "bookingInstructions", ctx)

    return FlightDetails(
        flight_number=text(fragment, "flightNumber", ctx),
        airline=text(fragment, "airline", ctx),
        departure=_endpoint(fragment, "departure", ctx),
        arrival=_endpoint(fragment, "arrival", ctx),
        duration=text(fragment, "duration", ctx),
        aircraft=text(fragment, "aircraft", ctx),
        cost=parse_cost_field(fragment, "cost", ctx),
        booking_class=text(fragment, "bookingClass", ctx, settings.default_booking_class),
        booking_url=optional_str(fragment, "bookingUrl", ctx),
        seat_recommendations=optional_str(fragment, "seatRecommendations", ctx),
        booking_instructions=segment_instructions or leg.booking_instructions,
        notes=optional_str(fragment, "notes", ctx),
        is_booked=_override(leg.is_booked, optional_bool(fragment, "isBooked", ctx, None)),
        booking_reference=_override(
            leg.booking_reference, optional_str(fragment, "bookingReference", ctx)
        ),
        booked_date=_override(leg.booked_date, optional_str(fragment, "bookedDate", ctx)),
        seat_numbers=_override(leg.seat_numbers, optional_str(fragment, "seatNumbers", ctx)),
    )


def _numeric_key(key: Any) -> int:
    try:
        return int(key)
    except (TypeError, ValueError):
        return 0


def extract_flight_legs(raw: Any) -> tuple[list[Any], Fragment | None]:
    """Return the raw legs and the container mapping (if any).

    Supported shapes: ``{"allFlights": [...]}``, ``{"allFlights": {"0": ...,
    "1": ...}}`` (ordered by numeric key), and a bare list of legs.
    """
    if isinstance(raw, list):
        return list(raw), None

    if not isinstance(raw, Mapping):
        return [], None

    all_flights = raw.get("allFlights")
    if isinstance(all_flights, list):
        return list(all_flights), raw
    if isinstance(all_flights, Mapping):
        ordered = sorted(all_flights.keys(), key=_numeric_key)
        return [all_flights[key] for key in ordered], raw
    return [], raw


def _parse_leg(leg: Any, ctx: ParseContext) -> FlightDetails | None:
    if not isinstance(leg, Mapping):
        skip_item(ctx, "flights", f"expected mapping, got {type(leg).__name__}")
        return None

    segments = leg.get("segments")
    if not isinstance(segments, list) or not segments or not isinstance(segments[0], Mapping):
        skip_item(ctx, "flights", "leg has no segments")
        return None

    try:
        return parse_flight_details(
            segments[0], ctx.child("segments", 0), LegContext.from_leg(leg, ctx)
        )
    except DocumentParseError as exc:
        skip_item(ctx, "flights", str(exc))
        return None


def parse_flight_itinerary(raw: Any, ctx: ParseContext) -> FlightItinerary:
    """Parse the stored flights of a detailed itinerary.

    Never fails: unusable legs leave their slot empty, and a missing
    outbound leg becomes the placeholder flight. The total flight cost is
    the cash-only sum of every parsed leg's ``cash_amount``, whatever the
    leg's payment type.
    """
    if raw is not None and not isinstance(raw, (list, Mapping)):
        drop_structure(ctx, "flights", f"expected mapping or list, got {type(raw).__name__}")
        return FlightItinerary.empty()

    legs, container = extract_flight_legs(raw)
    legs_ctx = ctx.child("allFlights") if container is not None else ctx

    outbound: FlightDetails | None = None
    return_flight: FlightDetails | None = None
    additional: list[FlightDetails] = []
    cash_total = 0.0

    for index, leg in enumerate(legs):
        details = _parse_leg(leg, legs_ctx.child(index))
        if details is None:
            continue
        cash_total += details.cost.cash_amount
        if index == 0:
            outbound = details
        elif index == 1:
            return_flight = details
        else:
            additional.append(details)

    if outbound is None and legs:
        logger.debug("No usable outbound leg at %s; using placeholder", ctx.location)

    container = container or {}
    return FlightItinerary(
        outbound=FlightDetails.placeholder() if outbound is None else outbound,
        return_flight=return_flight,
        additional_flights=additional,
        total_flight_cost=FlexibleCost.cash_only(cash_total),
        booking_deadline=text(container, "bookingDeadline", ctx),
        booking_instructions=text(container, "bookingInstructions", ctx).strip(),
    )
