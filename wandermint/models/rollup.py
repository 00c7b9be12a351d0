"""Cost rollup models - per-category totals that keep payment types visible."""

from enum import Enum

from pydantic import BaseModel, Field

from wandermint.models.cost import FlexibleCost


class CostCategory(str, Enum):
    """Rollup group."""

    flights = "flights"
    accommodations = "accommodations"
    transportation = "transportation"
    activities = "activities"
    meals = "meals"


class CostLine(BaseModel):
    """One priced item in a rollup group."""

    label: str
    cost: FlexibleCost


class CostGroup(BaseModel):
    """Items of one category with their totals."""

    category: CostCategory
    lines: list[CostLine] = Field(default_factory=list)
    cash_total: float = 0.0
    cash_equivalent_total: float = 0.0
    points_by_program: dict[str, int] = Field(default_factory=dict)

    @property
    def costs(self) -> list[FlexibleCost]:
        return [line.cost for line in self.lines]


class CostRollup(BaseModel):
    """Itinerary cost rollup.

    ``grand_total`` sums cash-equivalent values and is the figure used for
    budget comparisons; points lines stay listed in their groups.
    """

    flights: CostGroup
    accommodations: CostGroup
    transportation: CostGroup
    activities: CostGroup
    meals: CostGroup
    grand_total: float
    grand_cash_total: float
    points_by_program: dict[str, int] = Field(default_factory=dict)

    @property
    def groups(self) -> list[CostGroup]:
        return [self.flights, self.accommodations, self.transportation, self.activities, self.meals]
