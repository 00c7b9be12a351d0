"""Tests for the cost aggregator."""

from typing import Any

from wandermint.costs import rollup_itinerary, rollup_trip, summarize_costs
from wandermint.models.cost import FlexibleCost
from wandermint.models.rollup import CostCategory, CostLine
from wandermint.parsing import ParseContext, parse_detailed_itinerary, parse_trip_or_raise


def make_mixed_costs() -> list[FlexibleCost]:
    """Cash, points and hybrid costs worth 65 in cash equivalents."""
    return [
        FlexibleCost.cash_only(10),
        FlexibleCost.points_only(5000, "Amex", 50),
        FlexibleCost.hybrid(5, 2000, "Amex"),
    ]


def test_summarize_mixed_payment_types() -> None:
    """Test totals over cash, points and hybrid costs."""
    group = summarize_costs(make_mixed_costs())

    assert group.category == CostCategory.activities
    assert len(group.lines) == 3
    assert [line.label for line in group.lines] == ["Item 1", "Item 2", "Item 3"]
    assert group.cash_equivalent_total == 65
    assert group.cash_total == 15
    assert group.points_by_program == {"Amex": 7000}


def test_summarize_keeps_labelled_lines() -> None:
    """Test that CostLine inputs keep their labels."""
    group = summarize_costs(
        [CostLine(label="Museum", cost=FlexibleCost.cash_only(20))], CostCategory.meals
    )

    assert group.category == CostCategory.meals
    assert group.lines[0].label == "Museum"
    assert group.costs == [FlexibleCost.cash_only(20)]


def test_summarize_empty() -> None:
    """Test an empty group."""
    group = summarize_costs([])

    assert group.lines == []
    assert group.cash_total == 0
    assert group.cash_equivalent_total == 0
    assert group.points_by_program == {}


def test_rollup_itinerary(itinerary_document: dict[str, Any]) -> None:
    """Test the per-category rollup of a full itinerary."""
    itinerary = parse_detailed_itinerary(itinerary_document, ParseContext())
    rollup = rollup_itinerary(itinerary)

    assert [line.label for line in rollup.flights.lines] == ["Outbound", "Return"]
    assert rollup.flights.cash_total == 600
    assert rollup.flights.cash_equivalent_total == 1100
    assert rollup.flights.points_by_program == {"United": 40000}
    assert rollup.accommodations.lines[0].label == "Park Hyatt Tokyo"
    assert [line.label for line in rollup.transportation.lines] == [
        "Train: Tokyo → Kyoto",
        "Metro/Subway: Hotel → Shrine",
    ]
    assert rollup.activities.cash_equivalent_total == 10
    assert rollup.meals.lines[0].label == "Sukiyabashi"
    assert rollup.grand_total == 2210
    assert rollup.grand_cash_total == 1710
    assert rollup.points_by_program == {"United": 40000}
    assert len(rollup.groups) == 5


def test_rollup_ground_only_itinerary() -> None:
    """Test that the flight placeholder is not a cost line."""
    itinerary = parse_detailed_itinerary(
        {
            "id": "itin-2",
            "dailyPlans": [
                {
                    "id": "day-1",
                    "dayNumber": 1,
                    "date": "2025-09-01",
                    "title": "Walk",
                    "meals": [{"id": "m-1", "type": "breakfast", "estimatedCost": {"cash": 12}}],
                }
            ],
        },
        ParseContext(),
    )
    rollup = rollup_itinerary(itinerary)

    assert rollup.flights.lines == []
    assert rollup.meals.lines[0].label == "Breakfast"
    assert rollup.grand_total == 12


def test_additional_flight_labels() -> None:
    """Test labels of legs beyond the return flight."""
    legs = [
        {"segments": [{"flightNumber": f"X{n}", "cost": {"paymentType": "cash", "cashAmount": 100}}]}
        for n in range(4)
    ]
    itinerary = parse_detailed_itinerary({"id": "itin-3", "flights": legs}, ParseContext())

    labels = [line.label for line in rollup_itinerary(itinerary).flights.lines]
    assert labels == ["Outbound", "Return", "Flight 3", "Flight 4"]


def test_rollup_trip_without_itinerary(trip_document: dict[str, Any]) -> None:
    """Test that a trip without a detailed itinerary has no rollup."""
    assert rollup_trip(parse_trip_or_raise(trip_document)) is None

    trip_document["recommendation"] = {"id": "rec-1", "destination": "Tokyo", "overview": "Soon"}
    assert rollup_trip(parse_trip_or_raise(trip_document)) is None


def test_rollup_trip(
    trip_document: dict[str, Any], recommendation_document: dict[str, Any]
) -> None:
    """Test the rollup of a trip's itinerary."""
    trip_document["recommendation"] = recommendation_document
    rollup = rollup_trip(parse_trip_or_raise(trip_document))

    assert rollup is not None
    assert rollup.grand_total == 2210
