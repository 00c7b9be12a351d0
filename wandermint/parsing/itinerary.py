"""Detailed itinerary parsers: days, activities, meals, lodging, logistics."""

from collections.abc import Mapping

from wandermint.config import get_settings
from wandermint.models.common import ActivityLocation, ContactInfo, LocationCoordinates
from wandermint.models.cost import CostBreakdown
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
    MealRecommendation,
    MedicalFacility,
)
from wandermint.models.vocabularies import AccommodationType, ActivityCategory, MealType
from wandermint.parsing.context import (
    Fragment,
    ParseContext,
    parse_items,
    parse_optional,
    skip_item,
)
from wandermint.parsing.costs import parse_cost_breakdown, parse_cost_field
from wandermint.parsing.fields import (
    finite_float,
    first_of,
    optional_bool,
    optional_float,
    optional_int,
    optional_mapping,
    optional_str,
    optional_str_list,
    require_int,
    require_str,
    resolve_tag,
    str_list,
    str_map,
    text,
)
from wandermint.parsing.flights import parse_flight_itinerary
from wandermint.parsing.transport import parse_local_transportation

# Current key first.
MAJOR_TRANSPORT_KEYS = ("transportation", "majorTransportation")
TRIPADVISOR_ID_KEYS = ("tripAdvisorLocationId", "tripadvisorId")


# Shared pieces


def parse_coordinates(fragment: Fragment) -> LocationCoordinates | None:
    """Coordinates need both a numeric latitude and longitude."""
    latitude = finite_float(fragment.get("latitude"))
    longitude = finite_float(fragment.get("longitude"))
    if latitude is None or longitude is None:
        return None
    return LocationCoordinates(latitude=latitude, longitude=longitude)


def parse_activity_location(fragment: Fragment, ctx: ParseContext) -> ActivityLocation:
    coordinates = optional_mapping(fragment, "coordinates")
    return ActivityLocation(
        name=text(fragment, "name", ctx),
        address=text(fragment, "address", ctx),
        coordinates=parse_coordinates(coordinates) if coordinates is not None else None,
        nearby_landmarks=optional_str(fragment, "nearbyLandmarks", ctx),
    )


def _location(fragment: Fragment, ctx: ParseContext) -> ActivityLocation:
    raw = optional_mapping(fragment, "location")
    if raw is None:
        return ActivityLocation()
    return parse_activity_location(raw, ctx.child("location"))


def parse_contact_info(fragment: Fragment, ctx: ParseContext) -> ContactInfo:
    return ContactInfo(
        phone=optional_str(fragment, "phone", ctx),
        email=optional_str(fragment, "email", ctx),
        website=optional_str(fragment, "website", ctx),
    )


# Days


def parse_daily_activity(fragment: Fragment, ctx: ParseContext) -> DailyActivity:
    """Parse a scheduled activity.

    Raises:
        MissingFieldError: ``id``, ``time``, ``title`` or ``description`` is absent
    """
    return DailyActivity(
        id=require_str(fragment, "id", ctx),
        time=require_str(fragment, "time", ctx),
        title=require_str(fragment, "title", ctx),
        description=require_str(fragment, "description", ctx),
        duration=text(fragment, "duration", ctx),
        location=_location(fragment, ctx),
        cost=parse_cost_field(fragment, "cost", ctx),
        booking_required=optional_bool(fragment, "bookingRequired", ctx),
        booking_url=optional_str(fragment, "bookingUrl", ctx),
        booking_instructions=optional_str(fragment, "bookingInstructions", ctx),
        tips=str_list(fragment, "tips", ctx),
        category=resolve_tag(ActivityCategory, fragment, "category", ctx),
    )


def parse_meal(fragment: Fragment, ctx: ParseContext) -> MealRecommendation:
    return MealRecommendation(
        id=require_str(fragment, "id", ctx),
        meal_type=resolve_tag(MealType, fragment, "type", ctx),
        time=text(fragment, "time", ctx),
        restaurant_name=text(fragment, "restaurantName", ctx),
        cuisine=text(fragment, "cuisine", ctx),
        description=text(fragment, "description", ctx),
        location=_location(fragment, ctx),
        estimated_cost=parse_cost_field(fragment, "estimatedCost", ctx),
        reservation_required=optional_bool(fragment, "reservationRequired", ctx),
        reservation_url=optional_str(fragment, "reservationUrl", ctx),
        reservation_instructions=optional_str(fragment, "reservationInstructions", ctx),
        dietary_accommodations=str_list(fragment, "dietaryAccommodations", ctx),
    )


def parse_daily_plan(fragment: Fragment, ctx: ParseContext) -> DailyPlan:
    """Parse one day; bad activities, meals or transport are skipped.

    Raises:
        MissingFieldError: ``id``, ``dayNumber``, ``date`` or ``title`` is absent
        WrongTypeError: ``dayNumber`` is not an integer
    """
    return DailyPlan(
        id=require_str(fragment, "id", ctx),
        day_number=require_int(fragment, "dayNumber", ctx),
        date=require_str(fragment, "date", ctx),
        title=require_str(fragment, "title", ctx),
        activities=parse_items(
            parse_daily_activity, fragment.get("activities"), ctx.child("activities"), "activities"
        ),
        meals=parse_items(parse_meal, fragment.get("meals"), ctx.child("meals"), "meals"),
        transportation=parse_items(
            parse_local_transportation,
            fragment.get("transportation"),
            ctx.child("transportation"),
            "transportation",
        ),
        estimated_cost=parse_cost_field(fragment, "estimatedCost", ctx),
        notes=optional_str(fragment, "notes", ctx),
    )


# Lodging


def parse_photos(
    fragment: Fragment, ctx: ParseContext, accommodation_id: str
) -> list[AccommodationPhoto] | None:
    """Listing photos; entries without a ``url`` are skipped."""
    raw = fragment.get("photos")
    if not isinstance(raw, list):
        return None

    photos_ctx = ctx.child("photos")
    photos: list[AccommodationPhoto] = []
    for index, item in enumerate(raw):
        item_ctx = photos_ctx.child(index)
        if not isinstance(item, Mapping) or not isinstance(item.get("url"), str):
            skip_item(item_ctx, "photos", "photo has no url")
            continue
        photos.append(
            AccommodationPhoto(
                id=optional_str(item, "id", item_ctx) or f"{accommodation_id}-photo-{index}",
                url=item["url"],
                caption=optional_str(item, "caption", item_ctx),
                width=optional_int(item, "width", item_ctx),
                height=optional_int(item, "height", item_ctx),
            )
        )
    return photos


def _contact(fragment: Fragment, ctx: ParseContext) -> ContactInfo:
    raw = optional_mapping(fragment, "contactInfo")
    if raw is None:
        return ContactInfo()
    return parse_contact_info(raw, ctx.child("contactInfo"))


def _tripadvisor_id(fragment: Fragment) -> str | None:
    return first_of(
        fragment,
        [
            lambda f, key=key: f.get(key) if isinstance(f.get(key), str) else None
            for key in TRIPADVISOR_ID_KEYS
        ],
    )


def parse_accommodation_details(fragment: Fragment, ctx: ParseContext) -> AccommodationDetails:
    """Parse a stay from the detailed itinerary.

    Raises:
        MissingFieldError: ``id``, ``name``, ``checkIn``, ``checkOut`` or
            ``nights`` is absent
        WrongTypeError: ``nights`` is not an integer
    """
    accommodation_id = require_str(fragment, "id", ctx)
    return AccommodationDetails(
        id=accommodation_id,
        name=require_str(fragment, "name", ctx),
        type=resolve_tag(AccommodationType, fragment, "type", ctx),
        check_in=require_str(fragment, "checkIn", ctx),
        check_out=require_str(fragment, "checkOut", ctx),
        nights=require_int(fragment, "nights", ctx),
        location=_location(fragment, ctx),
        room_type=text(fragment, "roomType", ctx),
        amenities=str_list(fragment, "amenities", ctx),
        cost=parse_cost_field(fragment, "cost", ctx),
        booking_url=optional_str(fragment, "bookingUrl", ctx),
        booking_instructions=text(fragment, "bookingInstructions", ctx),
        cancellation_policy=text(fragment, "cancellationPolicy", ctx),
        contact_info=_contact(fragment, ctx),
        photos=parse_photos(fragment, ctx, accommodation_id),
        description=optional_str(fragment, "description", ctx),
        rating=optional_float(fragment, "rating", ctx, None),
        num_reviews=optional_int(fragment, "numReviews", ctx),
        price_level=optional_str(fragment, "priceLevel", ctx),
        hotel_chain=optional_str(fragment, "hotelChain", ctx),
        tripadvisor_url=optional_str(fragment, "tripadvisorUrl", ctx),
        tripadvisor_id=_tripadvisor_id(fragment),
        consultant_notes=optional_str(fragment, "consultantNotes", ctx),
        source=optional_str(fragment, "source", ctx),
        airbnb_url=optional_str(fragment, "airbnbUrl", ctx),
        airbnb_listing_id=optional_str(fragment, "airbnbListingId", ctx),
        host_name=optional_str(fragment, "hostName", ctx),
        host_is_superhost=optional_bool(fragment, "hostIsSuperhost", ctx, None),
        property_type=optional_str(fragment, "propertyType", ctx),
        bedrooms=optional_int(fragment, "bedrooms", ctx),
        bathrooms=optional_float(fragment, "bathrooms", ctx, None),
        max_guests=optional_int(fragment, "maxGuests", ctx),
        instant_book=optional_bool(fragment, "instantBook", ctx, None),
        neighborhood=optional_str(fragment, "neighborhood", ctx),
        house_rules=optional_str_list(fragment, "houseRules", ctx),
        check_in_instructions=optional_str(fragment, "checkInInstructions", ctx),
        is_booked=optional_bool(fragment, "isBooked", ctx, None),
        booking_reference=optional_str(fragment, "bookingReference", ctx),
        booked_date=optional_str(fragment, "bookedDate", ctx),
    )


# Logistics


def parse_booking_instructions(fragment: Fragment, ctx: ParseContext) -> BookingInstructions:
    return BookingInstructions(
        overall_instructions=text(fragment, "overallInstructions", ctx),
        flight_booking_tips=str_list(fragment, "flightBookingTips", ctx),
        accommodation_booking_tips=str_list(fragment, "accommodationBookingTips", ctx),
        activity_booking_tips=str_list(fragment, "activityBookingTips", ctx),
        payment_methods=str_list(fragment, "paymentMethods", ctx),
        cancellation_policies=text(fragment, "cancellationPolicies", ctx),
        travel_insurance_recommendation=optional_str(fragment, "travelInsuranceRecommendation", ctx),
    )


def parse_emergency_contact(fragment: Fragment, ctx: ParseContext) -> EmergencyContact:
    return EmergencyContact(
        id=require_str(fragment, "id", ctx),
        name=require_str(fragment, "name", ctx),
        relationship=text(fragment, "relationship", ctx),
        phone=require_str(fragment, "phone", ctx),
        email=optional_str(fragment, "email", ctx),
    )


def parse_embassy(fragment: Fragment, ctx: ParseContext) -> EmbassyInfo:
    return EmbassyInfo(
        name=require_str(fragment, "name", ctx),
        address=text(fragment, "address", ctx),
        phone=text(fragment, "phone", ctx),
        email=optional_str(fragment, "email", ctx),
        website=optional_str(fragment, "website", ctx),
    )


def parse_medical_facility(fragment: Fragment, ctx: ParseContext) -> MedicalFacility:
    return MedicalFacility(
        id=require_str(fragment, "id", ctx),
        name=require_str(fragment, "name", ctx),
        facility_type=text(fragment, "type", ctx),
        address=text(fragment, "address", ctx),
        phone=text(fragment, "phone", ctx),
        english_speaking=optional_bool(fragment, "englishSpeaking", ctx),
    )


def parse_emergency_info(fragment: Fragment, ctx: ParseContext) -> EmergencyInfo:
    return EmergencyInfo(
        emergency_contacts=parse_items(
            parse_emergency_contact,
            fragment.get("emergencyContacts"),
            ctx.child("emergencyContacts"),
            "emergency_contacts",
        ),
        local_emergency_numbers=str_map(fragment, "localEmergencyNumbers", ctx),
        nearest_embassy=parse_optional(
            parse_embassy,
            fragment.get("nearestEmbassy"),
            ctx.child("nearestEmbassy"),
            "nearest_embassy",
        ),
        medical_facilities=parse_items(
            parse_medical_facility,
            fragment.get("medicalFacilities"),
            ctx.child("medicalFacilities"),
            "medical_facilities",
        ),
        important_phrases=str_map(fragment, "importantPhrases", ctx),
    )


# Itinerary


def _total_cost(fragment: Fragment, ctx: ParseContext) -> CostBreakdown:
    raw = optional_mapping(fragment, "totalCost")
    if raw is None:
        return CostBreakdown(currency=get_settings().default_currency)
    return parse_cost_breakdown(raw, ctx.child("totalCost"))


def parse_detailed_itinerary(fragment: Fragment, ctx: ParseContext) -> DetailedItinerary:
    """Parse a detailed itinerary.

    Flights never fail the itinerary (a ground-only trip gets the empty
    flight placeholder). Booking instructions and emergency info are
    optional structures; days, stays and transport are lists whose bad
    members are skipped.

    Raises:
        MissingFieldError: ``id`` is absent
    """
    itinerary_id = require_str(fragment, "id", ctx)
    transport_key = next(
        (key for key in MAJOR_TRANSPORT_KEYS if fragment.get(key) is not None), None
    )
    major_transportation = None
    if transport_key is not None:
        major_transportation = parse_items(
            parse_local_transportation,
            fragment[transport_key],
            ctx.child(transport_key),
            "transportation",
        )

    return DetailedItinerary(
        id=itinerary_id,
        flights=parse_flight_itinerary(fragment.get("flights"), ctx.child("flights")),
        major_transportation=major_transportation,
        daily_plans=parse_items(
            parse_daily_plan, fragment.get("dailyPlans"), ctx.child("dailyPlans"), "daily_plans"
        ),
        accommodations=parse_items(
            parse_accommodation_details,
            fragment.get("accommodations"),
            ctx.child("accommodations"),
            "accommodations",
        ),
        total_cost=_total_cost(fragment, ctx),
        booking_instructions=parse_optional(
            parse_booking_instructions,
            fragment.get("bookingInstructions"),
            ctx.child("bookingInstructions"),
            "booking_instructions",
        ),
        emergency_info=parse_optional(
            parse_emergency_info,
            fragment.get("emergencyInfo"),
            ctx.child("emergencyInfo"),
            "emergency_info",
        ),
    )
