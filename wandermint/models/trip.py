"""Trip aggregate and its recommendation."""

from datetime import datetime

from pydantic import Field

from wandermint.models.common import DocumentModel
from wandermint.models.cost import CostBreakdown
from wandermint.models.itinerary import DetailedItinerary
from wandermint.models.vocabularies import TripStatus


class Activity(DocumentModel):
    """Flat activity suggestion from the legacy recommendation format."""

    id: str
    name: str
    description: str = ""
    category: str = ""
    estimated_duration: str = ""
    estimated_cost: float = 0.0
    priority: int = 3  # 1 = highest


class Accommodation(DocumentModel):
    """Flat lodging suggestion from the legacy recommendation format."""

    id: str
    name: str
    type: str = ""
    description: str = ""
    price_range: str = ""
    rating: float = 0.0
    amenities: list[str] = Field(default_factory=list)


class FlightInfo(DocumentModel):
    recommended_airlines: list[str]
    estimated_flight_time: str
    best_booking_time: str


class TransportationSummary(DocumentModel):
    """Legacy transport overview attached to a recommendation."""

    flight_info: FlightInfo | None = None
    local_transport: list[str] = Field(default_factory=list)
    estimated_flight_cost: float = 0.0
    local_transport_cost: float = 0.0


class Recommendation(DocumentModel):
    """Consultant recommendation for a trip.

    When ``itinerary`` is present it supersedes the flat ``activities``,
    ``accommodations`` and ``transportation`` fields for presentation;
    documents written during the migration may carry both.
    """

    id: str
    destination_name: str = Field(alias="destination")
    overview: str
    itinerary: DetailedItinerary | None = None
    activities: list[Activity] = Field(default_factory=list)
    accommodations: list[Accommodation] = Field(default_factory=list)
    transportation: TransportationSummary | None = None
    estimated_cost: CostBreakdown = Field(default_factory=CostBreakdown)
    best_time_to_visit: str = ""
    tips: list[str] = Field(default_factory=list)
    created_at: datetime | None = None

    @property
    def has_detailed_itinerary(self) -> bool:
        return self.itinerary is not None


class Trip(DocumentModel):
    """Aggregate root: one submitted trip request and its recommendation."""

    id: str
    owner_id: str = Field(alias="userId")
    destination_names: list[str] = Field(alias="destinations", min_length=1)
    departure_location: str | None = None
    start_date: datetime
    end_date: datetime
    is_date_flexible: bool = Field(False, alias="flexibleDates")
    trip_duration: int | None = None
    status: TripStatus = TripStatus.pending
    created_at: datetime
    updated_at: datetime | None = None
    payment_method: str | None = None
    recommendation: Recommendation | None = None

    # Preferences
    budget: str | None = None
    travel_style: str | None = None
    group_size: int | None = None
    flight_class: str | None = None
    interests: list[str] | None = None
    special_requests: str | None = None

    @property
    def all_destinations(self) -> list[str]:
        return list(self.destination_names)

    @property
    def display_destinations(self) -> str:
        return ", ".join(self.destination_names)

    @property
    def city_count(self) -> int:
        return len(self.destination_names)

    @property
    def is_multi_city(self) -> bool:
        return self.city_count > 1

    @property
    def duration_days(self) -> int:
        """Whole days between start and end, compared at day granularity."""
        return (self.end_date.date() - self.start_date.date()).days

    @property
    def has_recommendation(self) -> bool:
        return self.recommendation is not None
