"""Detailed itinerary models - flights, daily plans, lodging, logistics."""

from pydantic import Field

from wandermint.models.common import ActivityLocation, ContactInfo, DocumentModel
from wandermint.models.cost import CostBreakdown, FlexibleCost
from wandermint.models.vocabularies import (
    AccommodationType,
    ActivityCategory,
    MealType,
    TransportMethod,
)


class FlightSegment(DocumentModel):
    """One end (departure or arrival) of a flight."""

    airport: str = ""
    airport_code: str = ""
    city: str = ""
    date: str = ""
    time: str = ""
    terminal: str | None = None
    gate: str | None = None


class FlightDetails(DocumentModel):
    """A single flight, summarized from the first segment of a leg."""

    flight_number: str = ""
    airline: str = ""
    departure: FlightSegment = Field(default_factory=FlightSegment)
    arrival: FlightSegment = Field(default_factory=FlightSegment)
    duration: str = ""
    aircraft: str = ""
    cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    booking_class: str = ""
    booking_url: str | None = None
    seat_recommendations: str | None = None
    booking_instructions: str | None = None
    notes: str | None = None

    # Booking tracking
    is_booked: bool | None = None
    booking_reference: str | None = None
    booked_date: str | None = None
    seat_numbers: str | None = None

    @classmethod
    def placeholder(cls) -> "FlightDetails":
        """Empty flight standing in for a missing outbound leg."""
        return cls()

    @property
    def is_placeholder(self) -> bool:
        return self == FlightDetails.placeholder()


class FlightItinerary(DocumentModel):
    """Flight legs assigned by position: outbound, return, additional."""

    outbound: FlightDetails = Field(default_factory=FlightDetails.placeholder)
    return_flight: FlightDetails | None = Field(None, alias="return")
    additional_flights: list[FlightDetails] = Field(default_factory=list)
    total_flight_cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    booking_deadline: str = ""
    booking_instructions: str = ""

    @classmethod
    def empty(cls) -> "FlightItinerary":
        """Itinerary for ground-only trips."""
        return cls()

    @property
    def all_flights(self) -> list[FlightDetails]:
        """Real flights in order, excluding the outbound placeholder."""
        flights = [] if self.outbound.is_placeholder else [self.outbound]
        if self.return_flight is not None:
            flights.append(self.return_flight)
        flights.extend(self.additional_flights)
        return flights

    @property
    def has_flights(self) -> bool:
        return bool(self.all_flights)


class LocalTransportation(DocumentModel):
    """Ground transport between two places.

    ``time`` is the combined departure time; the split date/time fields
    keep whatever the document stored.
    """

    id: str
    time: str = ""
    method: TransportMethod = TransportMethod.train
    from_location: str = Field("", alias="from")
    to_location: str = Field("", alias="to")
    duration: str = ""
    cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    instructions: str = ""
    booking_url: str | None = None
    departure_date: str = ""
    departure_time: str = ""
    arrival_date: str = ""
    arrival_time: str = ""


class DailyActivity(DocumentModel):
    """Scheduled activity within a day."""

    id: str
    time: str
    duration: str = ""
    title: str
    description: str
    location: ActivityLocation = Field(default_factory=ActivityLocation)
    cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    booking_required: bool = False
    booking_url: str | None = None
    booking_instructions: str | None = None
    tips: list[str] = Field(default_factory=list)
    category: ActivityCategory = ActivityCategory.sightseeing


class MealRecommendation(DocumentModel):
    """Restaurant suggestion for a meal slot."""

    id: str
    meal_type: MealType = Field(MealType.lunch, alias="type")
    time: str = ""
    restaurant_name: str = ""
    cuisine: str = ""
    description: str = ""
    location: ActivityLocation = Field(default_factory=ActivityLocation)
    estimated_cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    reservation_required: bool = False
    reservation_url: str | None = None
    reservation_instructions: str | None = None
    dietary_accommodations: list[str] = Field(default_factory=list)


class DailyPlan(DocumentModel):
    """One day of the itinerary."""

    id: str
    day_number: int
    date: str
    title: str
    activities: list[DailyActivity] = Field(default_factory=list)
    meals: list[MealRecommendation] = Field(default_factory=list)
    transportation: list[LocalTransportation] = Field(default_factory=list)
    estimated_cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    notes: str | None = None


class AccommodationPhoto(DocumentModel):
    """Listing photo."""

    id: str
    url: str
    caption: str | None = None
    width: int | None = None
    height: int | None = None


class AccommodationDetails(DocumentModel):
    """Booked or recommended stay."""

    id: str
    name: str
    type: AccommodationType = AccommodationType.hotel
    check_in: str
    check_out: str
    nights: int
    location: ActivityLocation = Field(default_factory=ActivityLocation)
    room_type: str = ""
    amenities: list[str] = Field(default_factory=list)
    cost: FlexibleCost = Field(default_factory=lambda: FlexibleCost.cash_only(0))
    booking_url: str | None = None
    booking_instructions: str = ""
    cancellation_policy: str = ""
    contact_info: ContactInfo = Field(default_factory=ContactInfo)

    # Listing details
    photos: list[AccommodationPhoto] | None = None
    description: str | None = None
    rating: float | None = None
    num_reviews: int | None = None
    price_level: str | None = None
    hotel_chain: str | None = None
    tripadvisor_url: str | None = None
    tripadvisor_id: str | None = None
    consultant_notes: str | None = None
    source: str | None = None

    # Airbnb listings
    airbnb_url: str | None = None
    airbnb_listing_id: str | None = None
    host_name: str | None = None
    host_is_superhost: bool | None = None
    property_type: str | None = None
    bedrooms: int | None = None
    bathrooms: float | None = None
    max_guests: int | None = None
    instant_book: bool | None = None
    neighborhood: str | None = None
    house_rules: list[str] | None = None
    check_in_instructions: str | None = None

    # Booking tracking
    is_booked: bool | None = None
    booking_reference: str | None = None
    booked_date: str | None = None


class BookingInstructions(DocumentModel):
    """How to book each part of the trip."""

    overall_instructions: str = ""
    flight_booking_tips: list[str] = Field(default_factory=list)
    accommodation_booking_tips: list[str] = Field(default_factory=list)
    activity_booking_tips: list[str] = Field(default_factory=list)
    payment_methods: list[str] = Field(default_factory=list)
    cancellation_policies: str = ""
    travel_insurance_recommendation: str | None = None


class EmergencyContact(DocumentModel):
    id: str
    name: str
    relationship: str = ""
    phone: str
    email: str | None = None


class EmbassyInfo(DocumentModel):
    name: str
    address: str = ""
    phone: str = ""
    email: str | None = None
    website: str | None = None


class MedicalFacility(DocumentModel):
    id: str
    name: str
    facility_type: str = Field("", alias="type")
    address: str = ""
    phone: str = ""
    english_speaking: bool = False


class EmergencyInfo(DocumentModel):
    """Safety information for the destination."""

    emergency_contacts: list[EmergencyContact] = Field(default_factory=list)
    local_emergency_numbers: dict[str, str] = Field(default_factory=dict)
    nearest_embassy: EmbassyInfo | None = None
    medical_facilities: list[MedicalFacility] = Field(default_factory=list)
    important_phrases: dict[str, str] = Field(default_factory=dict)


class DetailedItinerary(DocumentModel):
    """Full day-by-day itinerary with logistics."""

    id: str
    flights: FlightItinerary = Field(default_factory=FlightItinerary.empty)
    major_transportation: list[LocalTransportation] | None = None
    daily_plans: list[DailyPlan] = Field(default_factory=list)
    accommodations: list[AccommodationDetails] = Field(default_factory=list)
    total_cost: CostBreakdown = Field(default_factory=CostBreakdown)
    booking_instructions: BookingInstructions | None = None
    emergency_info: EmergencyInfo | None = None

    @property
    def all_activities(self) -> list[DailyActivity]:
        return [activity for day in self.daily_plans for activity in day.activities]
