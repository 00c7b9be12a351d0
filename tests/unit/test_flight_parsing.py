"""Tests for flight itinerary parsing."""

from typing import Any

import pytest

from wandermint.config import get_settings
from wandermint.models.cost import FlexibleCost
from wandermint.models.itinerary import FlightDetails
from wandermint.parsing.context import DiagnosticKind, ParseContext
from wandermint.parsing.flights import (
    LegContext,
    extract_flight_legs,
    parse_flight_details,
    parse_flight_itinerary,
)

POINTS = {"paymentType": "points", "pointsAmount": 30000, "pointsProgram": "AAdvantage"}
HYBRID = {"paymentType": "hybrid", "cashAmount": 120, "pointsAmount": 8000, "pointsProgram": "Amex"}


def make_leg(
    flight_number: str, cost: dict[str, Any] | None = None, **leg_fields: Any
) -> dict[str, Any]:
    """Build a leg with one segment."""
    segment: dict[str, Any] = {"flightNumber": flight_number, "airline": "Test Air"}
    if cost is not None:
        segment["cost"] = cost
    return {"segments": [segment], **leg_fields}


def test_three_legs_assigned_by_position() -> None:
    """Test leg 0 -> outbound, leg 1 -> return, leg 2 -> additional."""
    legs = [
        make_leg("AA1", {"paymentType": "cash", "cashAmount": 400}),
        make_leg("AA2", {**POINTS, "totalCashValue": 450}),
        make_leg("AA3", HYBRID),
    ]

    flights = parse_flight_itinerary({"allFlights": legs}, ParseContext())

    assert flights.outbound.flight_number == "AA1"
    assert flights.return_flight is not None
    assert flights.return_flight.flight_number == "AA2"
    assert [f.flight_number for f in flights.additional_flights] == ["AA3"]
    assert [f.flight_number for f in flights.all_flights] == ["AA1", "AA2", "AA3"]


def test_total_flight_cost_is_cash_only_sum() -> None:
    """Test that total flight cost sums cash amounts whatever the payment type."""
    legs = [
        make_leg("AA1", {"paymentType": "cash", "cashAmount": 400}),
        make_leg("AA2", {**POINTS, "cashAmount": 12.5, "totalCashValue": 450}),
        make_leg("AA3", HYBRID),
    ]

    flights = parse_flight_itinerary(legs, ParseContext())

    assert flights.total_flight_cost == FlexibleCost.cash_only(400 + 12.5 + 120)


def test_only_first_segment_is_read() -> None:
    """Test that layover segments are summarized by the first one."""
    leg = {"segments": [{"flightNumber": "UA1"}, {"flightNumber": "UA2"}]}
    flights = parse_flight_itinerary([leg], ParseContext())

    assert flights.outbound.flight_number == "UA1"
    assert flights.additional_flights == []


def test_missing_flights_give_placeholder() -> None:
    """Test that a ground-only itinerary gets the empty flight placeholder."""
    for raw in (None, [], {"allFlights": []}, {}):
        flights = parse_flight_itinerary(raw, ParseContext())
        assert flights.outbound.is_placeholder
        assert flights.return_flight is None
        assert not flights.has_flights
        assert flights.total_flight_cost.cash_amount == 0


def test_wrong_typed_flights_are_dropped() -> None:
    """Test that a non-container flights value parses as empty."""
    ctx = ParseContext()
    flights = parse_flight_itinerary("NH7", ctx)

    assert not flights.has_flights
    assert ctx.diagnostics[0].kind == DiagnosticKind.STRUCTURE_DROPPED


def test_numeric_key_mapping_is_ordered_numerically() -> None:
    """Test the index-keyed mapping layout."""
    raw = {
        "allFlights": {
            "10": make_leg("LH10"),
            "2": make_leg("LH2"),
            "0": make_leg("LH0"),
            "1": make_leg("LH1"),
        }
    }

    legs, container = extract_flight_legs(raw)
    flights = parse_flight_itinerary(raw, ParseContext())

    assert container is raw
    assert [leg["segments"][0]["flightNumber"] for leg in legs] == ["LH0", "LH1", "LH2", "LH10"]
    assert flights.outbound.flight_number == "LH0"
    assert [f.flight_number for f in flights.additional_flights] == ["LH2", "LH10"]


def test_leg_without_segments_leaves_slot_empty() -> None:
    """Test that an unusable outbound leg becomes the placeholder."""
    ctx = ParseContext()
    flights = parse_flight_itinerary(
        {"allFlights": [{"segments": []}, make_leg("BA2")]}, ctx
    )

    assert flights.outbound.is_placeholder
    assert flights.return_flight is not None
    assert flights.return_flight.flight_number == "BA2"
    assert [f.flight_number for f in flights.all_flights] == ["BA2"]
    assert ctx.diagnostics[0].kind == DiagnosticKind.ITEM_SKIPPED
    assert ctx.diagnostics[0].path == "allFlights[0]"


def test_bad_leg_cost_skips_only_that_leg() -> None:
    """Test that a points cost without a program skips its leg."""
    ctx = ParseContext()
    flights = parse_flight_itinerary(
        [
            make_leg("DL1", {"paymentType": "cash", "cashAmount": 300}),
            make_leg("DL2", {"paymentType": "points", "pointsAmount": 1000}),
        ],
        ctx,
    )

    assert flights.outbound.flight_number == "DL1"
    assert flights.return_flight is None
    assert flights.total_flight_cost.cash_amount == 300
    assert any(d.kind == DiagnosticKind.ITEM_SKIPPED for d in ctx.diagnostics)


def test_leg_booking_fields_override_segment() -> None:
    """Test that booking tracking stored on the leg reaches the flight."""
    leg = {
        "isBooked": True,
        "bookingReference": "LEG123",
        "bookedDate": "2025-05-01",
        "segments": [{"flightNumber": "NH7", "isBooked": False, "bookingReference": "SEG999"}],
    }

    flights = parse_flight_itinerary([leg], ParseContext())

    assert flights.outbound.is_booked is True
    assert flights.outbound.booking_reference == "LEG123"
    assert flights.outbound.booked_date == "2025-05-01"


def test_leg_instructions_fill_in_when_segment_has_none() -> None:
    """Test booking instruction propagation from leg to segment."""
    ctx = ParseContext()
    leg_ctx = LegContext(booking_instructions="Book on ana.co.jp")

    inherited = parse_flight_details({"flightNumber": "NH7"}, ctx, leg_ctx)
    own = parse_flight_details(
        {"flightNumber": "NH7", "bookingInstructions": "Call the desk"}, ctx, leg_ctx
    )

    assert inherited.booking_instructions == "Book on ana.co.jp"
    assert own.booking_instructions == "Call the desk"


def test_segment_endpoints_and_defaults() -> None:
    """Test segment endpoint parsing and missing-field defaults."""
    details = parse_flight_details(
        {
            "flightNumber": "NH7",
            "departure": {"airport": "San Francisco Intl", "airportCode": "SFO", "terminal": "I"},
        },
        ParseContext(),
    )

    assert details.departure.airport_code == "SFO"
    assert details.departure.terminal == "I"
    assert details.arrival.airport_code == ""
    assert details.cost == FlexibleCost.cash_only(0)
    assert details.booking_class == "economy"


def test_booking_class_default_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that the default booking class is configurable."""
    monkeypatch.setenv("DEFAULT_BOOKING_CLASS", "business")
    get_settings.cache_clear()

    details = parse_flight_details({"flightNumber": "NH7"}, ParseContext())
    assert details.booking_class == "business"


def test_container_booking_fields() -> None:
    """Test container-level deadline and instructions."""
    flights = parse_flight_itinerary(
        {"allFlights": [], "bookingDeadline": "2025-05-15", "bookingInstructions": " Book early "},
        ParseContext(),
    )

    assert flights.booking_deadline == "2025-05-15"
    assert flights.booking_instructions == "Book early"


def test_placeholder_is_empty_flight() -> None:
    """Test the placeholder flight."""
    placeholder = FlightDetails.placeholder()
    assert placeholder.is_placeholder
    assert placeholder.flight_number == ""
    assert placeholder.cost.cash_amount == 0
