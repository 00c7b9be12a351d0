"""Closed tag vocabularies used across trip documents.

Every vocabulary resolves raw tags through ``resolve`` and never raises:
a tag outside the vocabulary (or a non-string value) maps to the
vocabulary's default member. Matching ignores case, ``_``, ``-`` and
spaces, so ``in_progress``, ``inProgress`` and ``In Progress`` are the
same tag. Legacy tags are listed in each vocabulary's alias table.
"""

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def normalize_tag(raw: str) -> str:
    """Fold a raw tag to its comparison form."""
    return "".join(ch for ch in raw.lower() if ch not in "_- ")


def resolve_member(vocabulary: type[E], raw: object) -> tuple[E, bool]:
    """Resolve ``raw`` to a member of ``vocabulary``.

    Returns the member and whether the tag was recognized (canonical or
    alias). Unrecognized and non-string values yield the default member.
    """
    default: E = DEFAULTS[vocabulary]  # type: ignore[assignment]
    if not isinstance(raw, str):
        return default, False

    key = normalize_tag(raw)
    for member in vocabulary:
        if normalize_tag(member.value) == key:
            return member, True

    alias_target = ALIASES.get(vocabulary, {}).get(key)
    if alias_target is not None:
        return alias_target, True  # type: ignore[return-value]

    return default, False


class TripStatus(str, Enum):
    """Lifecycle of a submitted trip."""

    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"

    @property
    def label(self) -> str:
        return _TRIP_STATUS_LABELS[self]

    @classmethod
    def resolve(cls, raw: object) -> "TripStatus":
        """Resolve a stored tag; unknown tags are ``pending``."""
        return resolve_member(cls, raw)[0]


class PaymentType(str, Enum):
    """How a cost is paid."""

    cash = "cash"
    points = "points"
    hybrid = "hybrid"

    @property
    def label(self) -> str:
        return _PAYMENT_TYPE_LABELS[self]

    @classmethod
    def resolve(cls, raw: object) -> "PaymentType":
        """Resolve a stored tag; unknown tags are ``cash``."""
        return resolve_member(cls, raw)[0]


class ActivityCategory(str, Enum):
    """Category of a scheduled activity."""

    sightseeing = "sightseeing"
    cultural = "cultural"
    adventure = "adventure"
    relaxation = "relaxation"
    food = "food"
    shopping = "shopping"
    entertainment = "entertainment"
    transportation = "transportation"

    @property
    def label(self) -> str:
        return _ACTIVITY_CATEGORY_LABELS[self]

    @classmethod
    def resolve(cls, raw: object) -> "ActivityCategory":
        """Resolve a stored tag; unknown tags are ``sightseeing``."""
        return resolve_member(cls, raw)[0]


class AccommodationType(str, Enum):
    """Kind of lodging."""

    hotel = "hotel"
    resort = "resort"
    boutique = "boutique"
    airbnb = "airbnb"
    hostel = "hostel"
    guesthouse = "guesthouse"
    apartment = "apartment"
    villa = "villa"

    @property
    def label(self) -> str:
        return _ACCOMMODATION_TYPE_LABELS[self]

    @classmethod
    def resolve(cls, raw: object) -> "AccommodationType":
        """Resolve a stored tag; unknown tags are ``hotel``."""
        return resolve_member(cls, raw)[0]


class TransportMethod(str, Enum):
    """Ground transport mode."""

    walking = "walking"
    taxi = "taxi"
    uber = "uber"
    public_transport = "public_transport"
    metro = "metro"
    bus = "bus"
    train = "train"
    rental_car = "rental_car"

    @property
    def label(self) -> str:
        return _TRANSPORT_METHOD_LABELS[self]

    @classmethod
    def resolve(cls, raw: object) -> "TransportMethod":
        """Resolve a stored tag; unknown tags are ``train``."""
        return resolve_member(cls, raw)[0]


class MealType(str, Enum):
    """Meal slot of a restaurant recommendation."""

    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def resolve(cls, raw: object) -> "MealType":
        """Resolve a stored tag; unknown tags are ``lunch``."""
        return resolve_member(cls, raw)[0]


_TRIP_STATUS_LABELS = {
    TripStatus.pending: "Pending Review",
    TripStatus.in_progress: "Planning in Progress",
    TripStatus.completed: "Itinerary Ready",
    TripStatus.cancelled: "Cancelled",
}

_PAYMENT_TYPE_LABELS = {
    PaymentType.cash: "Cash",
    PaymentType.points: "Points",
    PaymentType.hybrid: "Cash + Points",
}

_ACTIVITY_CATEGORY_LABELS = {
    ActivityCategory.sightseeing: "Sightseeing",
    ActivityCategory.cultural: "Cultural",
    ActivityCategory.adventure: "Adventure",
    ActivityCategory.relaxation: "Relaxation",
    ActivityCategory.food: "Food & Dining",
    ActivityCategory.shopping: "Shopping",
    ActivityCategory.entertainment: "Entertainment",
    ActivityCategory.transportation: "Transportation",
}

_ACCOMMODATION_TYPE_LABELS = {
    AccommodationType.hotel: "Hotel",
    AccommodationType.resort: "Resort",
    AccommodationType.boutique: "Boutique Hotel",
    AccommodationType.airbnb: "Airbnb",
    AccommodationType.hostel: "Hostel",
    AccommodationType.guesthouse: "Guesthouse",
    AccommodationType.apartment: "Apartment",
    AccommodationType.villa: "Villa",
}

_TRANSPORT_METHOD_LABELS = {
    TransportMethod.walking: "Walking",
    TransportMethod.taxi: "Taxi",
    TransportMethod.uber: "Uber/Lyft",
    TransportMethod.public_transport: "Public Transport",
    TransportMethod.metro: "Metro/Subway",
    TransportMethod.bus: "Bus",
    TransportMethod.train: "Train",
    TransportMethod.rental_car: "Rental Car",
}

DEFAULTS: dict[type[Enum], Enum] = {
    TripStatus: TripStatus.pending,
    PaymentType: PaymentType.cash,
    ActivityCategory: ActivityCategory.sightseeing,
    AccommodationType: AccommodationType.hotel,
    TransportMethod: TransportMethod.train,
    MealType: MealType.lunch,
}

# Keys are normalized tags (see normalize_tag).
ALIASES: dict[type[Enum], dict[str, Enum]] = {
    TripStatus: {
        "submitted": TripStatus.pending,
        "processing": TripStatus.in_progress,
        "failed": TripStatus.cancelled,
    },
    TransportMethod: {
        "carrental": TransportMethod.rental_car,
        "car": TransportMethod.rental_car,
        "rental": TransportMethod.rental_car,
        "ferry": TransportMethod.bus,
        "rideshare": TransportMethod.taxi,
        "lyft": TransportMethod.uber,
        "subway": TransportMethod.metro,
        "walk": TransportMethod.walking,
    },
}
