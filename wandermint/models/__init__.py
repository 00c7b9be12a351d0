"""Models package - re-exports for convenience."""

from wandermint.models.common import (
    ActivityLocation,
    ContactInfo,
    DocumentModel,
    LocationCoordinates,
)
from wandermint.models.cost import CostBreakdown, FlexibleCost
from wandermint.models.itinerary import (
    AccommodationDetails,
    AccommodationPhoto,
    BookingInstructions,
    DailyActivity,
    DailyPlan,
    DetailedItinerary,
    EmbassyInfo,
    EmergencyContact,
    EmergencyInfo,
    FlightDetails,
    FlightItinerary,
    FlightSegment,
    LocalTransportation,
    MealRecommendation,
    MedicalFacility,
)
from wandermint.models.rollup import CostCategory, CostGroup, CostLine, CostRollup
from wandermint.models.trip import (
    Accommodation,
    Activity,
    FlightInfo,
    Recommendation,
    TransportationSummary,
    Trip,
)
from wandermint.models.vocabularies import (
    AccommodationType,
    ActivityCategory,
    MealType,
    PaymentType,
    TransportMethod,
    TripStatus,
)

__all__ = [
    # Common
    "DocumentModel",
    "ActivityLocation",
    "LocationCoordinates",
    "ContactInfo",
    # Vocabularies
    "TripStatus",
    "PaymentType",
    "ActivityCategory",
    "AccommodationType",
    "TransportMethod",
    "MealType",
    # Costs
    "FlexibleCost",
    "CostBreakdown",
    # Itinerary
    "FlightSegment",
    "FlightDetails",
    "FlightItinerary",
    "LocalTransportation",
    "DailyActivity",
    "MealRecommendation",
    "DailyPlan",
    "AccommodationPhoto",
    "AccommodationDetails",
    "BookingInstructions",
    "EmergencyContact",
    "EmbassyInfo",
    "MedicalFacility",
    "EmergencyInfo",
    "DetailedItinerary",
    # Trip
    "Activity",
    "Accommodation",
    "FlightInfo",
    "TransportationSummary",
    "Recommendation",
    "Trip",
    # Rollup
    "CostCategory",
    "CostLine",
    "CostGroup",
    "CostRollup",
]
