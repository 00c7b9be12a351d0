"""Trip assembler: one raw trip document in, one parse outcome out.

A document is rejected only when a required top-level field fails. The
recommendation (and everything nested in it) is optional: when it is
malformed the trip is still valid, just without a recommendation.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wandermint.errors import (
    DocumentParseError,
    MissingFieldError,
    TripRejectedError,
    WrongTypeError,
)
from wandermint.models.trip import Trip
from wandermint.models.vocabularies import TripStatus
from wandermint.parsing.context import (
    Diagnostic,
    DiagnosticKind,
    Fragment,
    ParseContext,
    parse_optional,
)
from wandermint.parsing.fields import (
    first_of,
    optional_bool,
    optional_instant,
    optional_int,
    optional_str,
    optional_str_list,
    require_instant,
    require_str,
    resolve_tag,
)
from wandermint.parsing.recommendation import parse_recommendation
from wandermint.utils.logging import StructuredParseLogger
from wandermint.utils.metrics import PrometheusParseMetrics

logger = logging.getLogger(__name__)

_log = StructuredParseLogger()
_metrics = PrometheusParseMetrics()


class TripParseOutcome(str, Enum):
    """Terminal states of parsing one trip document."""

    VALID_WITH_RECOMMENDATION = "valid_with_recommendation"
    VALID_WITHOUT_RECOMMENDATION = "valid_without_recommendation"
    REJECTED = "rejected"


@dataclass
class TripParseResult:
    """Outcome of one parse call, with the diagnostics recorded on the way."""

    outcome: TripParseOutcome
    trip: Trip | None = None
    error: TripRejectedError | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.outcome != TripParseOutcome.REJECTED


@dataclass
class TripBatch:
    """Results of parsing a list of documents, in input order."""

    results: list[TripParseResult] = field(default_factory=list)

    @property
    def trips(self) -> list[Trip]:
        return [result.trip for result in self.results if result.trip is not None]

    @property
    def rejections(self) -> list[TripRejectedError]:
        return [result.error for result in self.results if result.error is not None]


# Destinations: current list first, then the legacy single string.


def _destination_list(fragment: Fragment) -> list[str] | None:
    value = fragment.get("destinations")
    if not isinstance(value, list):
        return None
    names = [name for name in value if isinstance(name, str) and name]
    return names or None


def _legacy_destination(fragment: Fragment) -> list[str] | None:
    value = fragment.get("destination")
    if isinstance(value, str) and value:
        return [value]
    return None


DESTINATION_STRATEGIES = (_destination_list, _legacy_destination)


def resolve_destinations(fragment: Fragment, ctx: ParseContext) -> list[str]:
    """Destination names from either layout.

    Raises:
        MissingFieldError: neither layout yields a destination
    """
    names = first_of(fragment, DESTINATION_STRATEGIES)
    if names is None:
        raise MissingFieldError("destinations", path=ctx.path)
    return names


def _assemble(document: Fragment, ctx: ParseContext) -> Trip:
    # Required fields first so a rejection happens before optional work.
    trip_id = require_str(document, "id", ctx)
    owner_id = require_str(document, "userId", ctx)
    destinations = resolve_destinations(document, ctx)
    start_date = require_instant(document, "startDate", ctx)
    end_date = require_instant(document, "endDate", ctx)
    created_at = require_instant(document, "createdAt", ctx)

    return Trip(
        id=trip_id,
        owner_id=owner_id,
        destination_names=destinations,
        departure_location=optional_str(document, "departureLocation", ctx),
        start_date=start_date,
        end_date=end_date,
        is_date_flexible=optional_bool(document, "flexibleDates", ctx),
        trip_duration=optional_int(document, "tripDuration", ctx),
        status=resolve_tag(TripStatus, document, "status", ctx),
        created_at=created_at,
        updated_at=optional_instant(document, "updatedAt", ctx),
        payment_method=optional_str(document, "paymentMethod", ctx),
        recommendation=parse_optional(
            parse_recommendation,
            document.get("recommendation"),
            ctx.child("recommendation"),
            "recommendation",
        ),
        budget=optional_str(document, "budget", ctx),
        travel_style=optional_str(document, "travelStyle", ctx),
        group_size=optional_int(document, "groupSize", ctx),
        flight_class=optional_str(document, "flightClass", ctx),
        interests=optional_str_list(document, "interests", ctx),
        special_requests=optional_str(document, "specialRequests", ctx),
    )


def _reject(document: Any, cause: DocumentParseError, ctx: ParseContext) -> TripParseResult:
    trip_id = None
    if isinstance(document, Mapping) and isinstance(document.get("id"), str):
        trip_id = document["id"]

    kind = (
        DiagnosticKind.MISSING_FIELD
        if isinstance(cause, MissingFieldError)
        else DiagnosticKind.WRONG_TYPE
    )
    ctx.record_error(kind, cause)

    error = TripRejectedError(cause, trip_id=trip_id)
    error.__cause__ = cause

    _log.log_rejection(trip_id, cause.field, cause.message, cause.location)
    _metrics.inc_trip_outcome(TripParseOutcome.REJECTED.value)
    return TripParseResult(
        outcome=TripParseOutcome.REJECTED,
        error=error,
        diagnostics=ctx.diagnostics,
    )


def parse_trip(document: Any) -> TripParseResult:
    """Parse one raw trip document.

    Never raises for bad data: a rejected document comes back with
    ``outcome == REJECTED`` and ``error`` naming the failing field.
    """
    ctx = ParseContext()

    if not isinstance(document, Mapping):
        return _reject(document, WrongTypeError("<document>", "mapping", document), ctx)

    try:
        trip = _assemble(document, ctx)
    except DocumentParseError as exc:
        return _reject(document, exc, ctx)

    outcome = (
        TripParseOutcome.VALID_WITH_RECOMMENDATION
        if trip.has_recommendation
        else TripParseOutcome.VALID_WITHOUT_RECOMMENDATION
    )
    _metrics.inc_trip_outcome(outcome.value)
    if ctx.diagnostics:
        logger.debug(
            f"Parsed trip {trip.id} with {len(ctx.diagnostics)} diagnostics",
            extra={"structured": {"trip_id": trip.id, "outcome": outcome.value}},
        )
    return TripParseResult(outcome=outcome, trip=trip, diagnostics=ctx.diagnostics)


def parse_trip_or_raise(document: Any) -> Trip:
    """Parse one raw trip document, raising on rejection.

    Raises:
        TripRejectedError: a required top-level field failed; the original
            MissingFieldError/WrongTypeError is the ``__cause__``
    """
    result = parse_trip(document)
    if result.trip is None:
        assert result.error is not None
        raise result.error from result.error.cause
    return result.trip


def parse_trips(documents: Iterable[Any]) -> TripBatch:
    """Parse a list of documents; rejected ones never stop the batch."""
    batch = TripBatch(results=[parse_trip(document) for document in documents])
    rejected = len(batch.rejections)
    if rejected:
        logger.info(
            f"Parsed {len(batch.results)} trip documents, {rejected} rejected",
            extra={"structured": {"total": len(batch.results), "rejected": rejected}},
        )
    return batch
