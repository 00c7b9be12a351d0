"""Cost aggregator: rolls item costs up by category.

Points costs are never converted to cash here. Each group keeps its
individual lines; ``cash_total`` sums the cash parts and
``cash_equivalent_total`` sums ``total_cash_value``, which is the only
figure that feeds the grand total.
"""

from collections.abc import Iterable

from wandermint.models.cost import FlexibleCost
from wandermint.models.itinerary import DetailedItinerary, FlightItinerary
from wandermint.models.rollup import CostCategory, CostGroup, CostLine, CostRollup
from wandermint.models.trip import Trip


def _merge_points(target: dict[str, int], source: dict[str, int]) -> None:
    for program, points in source.items():
        target[program] = target.get(program, 0) + points


def summarize_costs(
    costs: Iterable[FlexibleCost | CostLine],
    category: CostCategory = CostCategory.activities,
) -> CostGroup:
    """Build a group from costs or labelled lines.

    Bare costs are labelled ``Item 1``, ``Item 2``, ... in input order.
    """
    lines: list[CostLine] = []
    for index, item in enumerate(costs, start=1):
        if isinstance(item, CostLine):
            lines.append(item)
        else:
            lines.append(CostLine(label=f"Item {index}", cost=item))

    points_by_program: dict[str, int] = {}
    for line in lines:
        program = line.cost.points_program
        if program and line.cost.points_amount:
            points_by_program[program] = points_by_program.get(program, 0) + line.cost.points_amount

    return CostGroup(
        category=category,
        lines=lines,
        cash_total=sum(line.cost.cash_amount for line in lines),
        cash_equivalent_total=sum(line.cost.total_cash_value for line in lines),
        points_by_program=points_by_program,
    )


def _flight_lines(flights: FlightItinerary) -> list[CostLine]:
    lines: list[CostLine] = []
    if not flights.outbound.is_placeholder:
        lines.append(CostLine(label="Outbound", cost=flights.outbound.cost))
    if flights.return_flight is not None:
        lines.append(CostLine(label="Return", cost=flights.return_flight.cost))
    for index, flight in enumerate(flights.additional_flights, start=3):
        lines.append(CostLine(label=f"Flight {index}", cost=flight.cost))
    return lines


def _transport_lines(itinerary: DetailedItinerary) -> list[CostLine]:
    transports = list(itinerary.major_transportation or [])
    for day in itinerary.daily_plans:
        transports.extend(day.transportation)
    return [
        CostLine(
            label=f"{transport.method.label}: {transport.from_location} → {transport.to_location}",
            cost=transport.cost,
        )
        for transport in transports
    ]


def rollup_itinerary(itinerary: DetailedItinerary) -> CostRollup:
    """Roll up every priced item of an itinerary.

    Groups: flights (each real leg), accommodations, transportation
    (itinerary-level plus each day's), activities and meals.
    """
    groups = {
        CostCategory.flights: summarize_costs(_flight_lines(itinerary.flights), CostCategory.flights),
        CostCategory.accommodations: summarize_costs(
            [CostLine(label=stay.name, cost=stay.cost) for stay in itinerary.accommodations],
            CostCategory.accommodations,
        ),
        CostCategory.transportation: summarize_costs(
            _transport_lines(itinerary), CostCategory.transportation
        ),
        CostCategory.activities: summarize_costs(
            [
                CostLine(label=activity.title, cost=activity.cost)
                for activity in itinerary.all_activities
            ],
            CostCategory.activities,
        ),
        CostCategory.meals: summarize_costs(
            [
                CostLine(
                    label=meal.restaurant_name or meal.meal_type.label,
                    cost=meal.estimated_cost,
                )
                for day in itinerary.daily_plans
                for meal in day.meals
            ],
            CostCategory.meals,
        ),
    }

    points_by_program: dict[str, int] = {}
    for group in groups.values():
        _merge_points(points_by_program, group.points_by_program)

    return CostRollup(
        flights=groups[CostCategory.flights],
        accommodations=groups[CostCategory.accommodations],
        transportation=groups[CostCategory.transportation],
        activities=groups[CostCategory.activities],
        meals=groups[CostCategory.meals],
        grand_total=sum(group.cash_equivalent_total for group in groups.values()),
        grand_cash_total=sum(group.cash_total for group in groups.values()),
        points_by_program=points_by_program,
    )


def rollup_trip(trip: Trip) -> CostRollup | None:
    """Rollup of the trip's detailed itinerary, or None when it has none."""
    if trip.recommendation is None or trip.recommendation.itinerary is None:
        return None
    return rollup_itinerary(trip.recommendation.itinerary)
