"""Local and long-distance ground transport parsing.

Two field-naming conventions exist for transport fragments. The current
one stores the mode in ``type`` and splits timing into
``departureDate``/``departureTime``/``arrivalDate``/``arrivalTime``; the
older one stores ``method`` and a single ``time`` string. Each logical
field is read with the current convention first.
"""

from wandermint.models.itinerary import LocalTransportation
from wandermint.models.vocabularies import TransportMethod
from wandermint.parsing.context import Fragment, ParseContext
from wandermint.parsing.costs import parse_cost_field
from wandermint.parsing.fields import first_of, optional_str, require_str, resolve_tag, text


def _nonempty_str(fragment: Fragment, key: str) -> str | None:
    value = fragment.get(key)
    return value if isinstance(value, str) and value else None


def _combined_departure(fragment: Fragment) -> str | None:
    date = _nonempty_str(fragment, "departureDate")
    time = _nonempty_str(fragment, "departureTime")
    if date and time:
        return f"{date} {time}"
    return None


TIME_STRATEGIES = (
    _combined_departure,
    lambda f: _nonempty_str(f, "departureTime"),
    lambda f: _nonempty_str(f, "time"),
)

INSTRUCTION_STRATEGIES = (
    lambda f: _nonempty_str(f, "bookingInstructions"),
    lambda f: _nonempty_str(f, "instructions"),
)

METHOD_KEYS = ("type", "method")


def parse_local_transportation(fragment: Fragment, ctx: ParseContext) -> LocalTransportation:
    """Parse a transport fragment in either naming convention.

    An unrecognized mode tag falls back to ``train``.

    Raises:
        MissingFieldError: ``id`` is absent
    """
    return LocalTransportation(
        id=require_str(fragment, "id", ctx),
        time=first_of(fragment, TIME_STRATEGIES) or "",
        method=resolve_tag(TransportMethod, fragment, METHOD_KEYS, ctx),
        from_location=text(fragment, "from", ctx),
        to_location=text(fragment, "to", ctx),
        duration=text(fragment, "duration", ctx),
        cost=parse_cost_field(fragment, "cost", ctx),
        instructions=first_of(fragment, INSTRUCTION_STRATEGIES) or "",
        booking_url=optional_str(fragment, "bookingUrl", ctx),
        departure_date=text(fragment, "departureDate", ctx),
        departure_time=text(fragment, "departureTime", ctx),
        arrival_date=text(fragment, "arrivalDate", ctx),
        arrival_time=text(fragment, "arrivalTime", ctx),
    )
