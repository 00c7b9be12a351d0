"""Field extractors for untyped document fragments.

All partial-data tolerance lives here. ``require_*`` raise
MissingFieldError / WrongTypeError; ``optional_*`` return the caller's
default when the field is absent, null, or of the wrong type (recording a
diagnostic for the latter). Numbers never come back non-finite.
"""

import math
import numbers
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from wandermint.errors import MissingFieldError, WrongTypeError
from wandermint.models.vocabularies import resolve_member
from wandermint.parsing.context import DiagnosticKind, Fragment, ParseContext
from wandermint.utils.logging import StructuredParseLogger
from wandermint.utils.metrics import PrometheusParseMetrics

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

_log = StructuredParseLogger()
_metrics = PrometheusParseMetrics()


def _is_number(value: Any) -> bool:
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def finite_float(value: Any) -> float | None:
    """Float form of a number, or None when it has no finite one."""
    if not _is_number(value):
        return None
    try:
        result = float(value)
    except (OverflowError, ValueError):
        return None
    return result if math.isfinite(result) else None


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        return int(value)
    return None


def _wrong_type(ctx: ParseContext, key: str, expected: str, value: Any) -> None:
    ctx.record(
        DiagnosticKind.WRONG_TYPE,
        f"Field '{key}' expected {expected}, got {type(value).__name__}; using default",
        field=key,
    )


def _present(fragment: Fragment, key: str, ctx: ParseContext) -> Any:
    value = fragment.get(key)
    if value is None:
        raise MissingFieldError(key, path=ctx.path)
    return value


# Required fields


def require_str(fragment: Fragment, key: str, ctx: ParseContext) -> str:
    value = _present(fragment, key, ctx)
    if not isinstance(value, str):
        raise WrongTypeError(key, "string", value, path=ctx.path)
    return value


def require_int(fragment: Fragment, key: str, ctx: ParseContext) -> int:
    value = _present(fragment, key, ctx)
    as_int = _as_int(value)
    if as_int is None:
        raise WrongTypeError(key, "integer", value, path=ctx.path)
    return as_int


def require_str_list(fragment: Fragment, key: str, ctx: ParseContext) -> list[str]:
    value = _present(fragment, key, ctx)
    if not isinstance(value, list):
        raise WrongTypeError(key, "list of strings", value, path=ctx.path)
    return [item for item in value if isinstance(item, str)]


def require_instant(fragment: Fragment, key: str, ctx: ParseContext) -> datetime:
    value = _present(fragment, key, ctx)
    instant = coerce_instant(value)
    if instant is None:
        raise WrongTypeError(key, "timestamp", value, path=ctx.path)
    return instant


# Optional fields


def optional_str(
    fragment: Fragment, key: str, ctx: ParseContext, default: str | None = None
) -> str | None:
    value = fragment.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        _wrong_type(ctx, key, "string", value)
        return default
    return value


def text(fragment: Fragment, key: str, ctx: ParseContext, default: str = "") -> str:
    """Optional free-text field that is never None."""
    value = optional_str(fragment, key, ctx, default)
    return default if value is None else value


def optional_int(
    fragment: Fragment, key: str, ctx: ParseContext, default: int | None = None
) -> int | None:
    value = fragment.get(key)
    if value is None:
        return default
    as_int = _as_int(value)
    if as_int is None:
        _wrong_type(ctx, key, "integer", value)
        return default
    return as_int


def optional_float(
    fragment: Fragment, key: str, ctx: ParseContext, default: float | None = 0.0
) -> float | None:
    value = fragment.get(key)
    if value is None:
        return default
    if not _is_number(value):
        _wrong_type(ctx, key, "number", value)
        return default
    as_float = finite_float(value)
    return 0.0 if as_float is None else as_float


def optional_bool(
    fragment: Fragment, key: str, ctx: ParseContext, default: bool | None = False
) -> bool | None:
    value = fragment.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        _wrong_type(ctx, key, "boolean", value)
        return default
    return value


def optional_str_list(
    fragment: Fragment, key: str, ctx: ParseContext, default: list[str] | None = None
) -> list[str] | None:
    """List of strings; non-string members are dropped."""
    value = fragment.get(key)
    if value is None:
        return default
    if not isinstance(value, list):
        _wrong_type(ctx, key, "list of strings", value)
        return default
    return [item for item in value if isinstance(item, str)]


def str_list(fragment: Fragment, key: str, ctx: ParseContext) -> list[str]:
    return optional_str_list(fragment, key, ctx, []) or []


def str_map(fragment: Fragment, key: str, ctx: ParseContext) -> dict[str, str]:
    """String-to-string mapping; other entries are dropped."""
    value = fragment.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        _wrong_type(ctx, key, "mapping", value)
        return {}
    return {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}


def optional_mapping(fragment: Fragment, key: str) -> Fragment | None:
    value = fragment.get(key)
    return value if isinstance(value, Mapping) else None


def optional_instant(
    fragment: Fragment, key: str, ctx: ParseContext
) -> datetime | None:
    value = fragment.get(key)
    if value is None:
        return None
    instant = coerce_instant(value)
    if instant is None:
        _wrong_type(ctx, key, "timestamp", value)
    return instant


# Timestamps


def coerce_instant(value: Any) -> datetime | None:
    """Read an instant from any stored representation.

    Accepts datetime objects (naive taken as UTC), ISO-8601 strings,
    ``{"seconds", "nanoseconds"}`` mappings (with or without a leading
    underscore), and epoch seconds.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    if isinstance(value, Mapping):
        seconds = finite_float(value.get("seconds", value.get("_seconds")))
        nanos = finite_float(value.get("nanoseconds", value.get("_nanoseconds", 0)))
        if seconds is None or nanos is None:
            return None
        return _from_epoch(seconds + nanos / 1e9)

    if _is_number(value):
        seconds = finite_float(value)
        return None if seconds is None else _from_epoch(seconds)

    return None


def _from_epoch(seconds: float) -> datetime | None:
    if not math.isfinite(seconds):
        return None
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


# Vocabularies


def resolve_tag(
    vocabulary: type[E],
    fragment: Fragment,
    key: str | Iterable[str],
    ctx: ParseContext,
) -> E:
    """Resolve a vocabulary tag, recording a diagnostic on fallback.

    ``key`` may be an ordered sequence of field names. The first one
    holding a string wins; a non-string value is only used (and reported)
    when no key holds a string.
    """
    keys = (key,) if isinstance(key, str) else tuple(key)
    present = [(k, fragment.get(k)) for k in keys if fragment.get(k) is not None]
    field_name, raw = next(
        ((k, v) for k, v in present if isinstance(v, str)),
        present[0] if present else (keys[0], None),
    )
    member, recognized = resolve_member(vocabulary, raw)
    if raw is not None and not recognized:
        ctx.record(
            DiagnosticKind.UNRESOLVABLE_ENUM,
            f"Unrecognized {vocabulary.__name__} tag {raw!r}; using {member.value}",
            field=field_name,
        )
        _log.log_vocabulary_fallback(vocabulary.__name__, raw, member.value, ctx.location)
        _metrics.inc_vocabulary_fallback(vocabulary.__name__)
    return member


# Schema drift


FieldStrategy = Callable[[Fragment], T | None]


def first_of(fragment: Fragment, strategies: Iterable[FieldStrategy[T]]) -> T | None:
    """Try extraction strategies in order (newest layout first).

    Returns the first non-None result, or None if no strategy matches.
    """
    for strategy in strategies:
        value = strategy(fragment)
        if value is not None:
            return value
    return None
