"""Tests for document field extractors."""

import math
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from wandermint.errors import MissingFieldError, WrongTypeError, format_path
from wandermint.models.vocabularies import TripStatus
from wandermint.parsing.context import DiagnosticKind, ParseContext
from wandermint.parsing.fields import (
    coerce_instant,
    first_of,
    optional_bool,
    optional_float,
    optional_int,
    optional_str,
    require_instant,
    require_int,
    require_str,
    resolve_tag,
    str_list,
    str_map,
    text,
)


def test_require_str_missing_raises_with_path() -> None:
    """Test that a missing required field names the field and path."""
    ctx = ParseContext(path=("recommendation", "itinerary", "dailyPlans", 0))
    with pytest.raises(MissingFieldError) as exc_info:
        require_str({}, "title", ctx)

    assert exc_info.value.field == "title"
    assert exc_info.value.location == "recommendation.itinerary.dailyPlans[0]"
    assert "title" in str(exc_info.value)


def test_require_str_null_counts_as_missing() -> None:
    """Test that an explicit null is treated as absent."""
    with pytest.raises(MissingFieldError):
        require_str({"id": None}, "id", ParseContext())


def test_require_str_wrong_type() -> None:
    """Test that a non-string value raises WrongTypeError."""
    with pytest.raises(WrongTypeError) as exc_info:
        require_str({"id": 12}, "id", ParseContext())

    assert exc_info.value.expected == "string"
    assert exc_info.value.actual == "int"


def test_require_int_accepts_integral_floats_only() -> None:
    """Test integer coercion rules."""
    ctx = ParseContext()
    assert require_int({"n": 3}, "n", ctx) == 3
    assert require_int({"n": 3.0}, "n", ctx) == 3
    with pytest.raises(WrongTypeError):
        require_int({"n": 3.5}, "n", ctx)
    with pytest.raises(WrongTypeError):
        require_int({"n": True}, "n", ctx)


def test_optional_float_clamps_non_finite_values() -> None:
    """Test that NaN and infinities become 0.0."""
    ctx = ParseContext()
    assert optional_float({"x": math.nan}, "x", ctx) == 0.0
    assert optional_float({"x": math.inf}, "x", ctx) == 0.0
    assert optional_float({"x": -math.inf}, "x", ctx) == 0.0
    assert optional_float({"x": 12.5}, "x", ctx) == 12.5


def test_optional_float_oversized_and_decimal_values() -> None:
    """Test that huge integers clamp to 0.0 and decimals convert."""
    ctx = ParseContext()
    assert optional_float({"x": 10**400}, "x", ctx) == 0.0
    assert optional_float({"x": -(10**400)}, "x", ctx) == 0.0
    assert optional_float({"x": Decimal("19.5")}, "x", ctx) == 19.5
    assert optional_float({"x": Decimal("NaN")}, "x", ctx) == 0.0
    assert ctx.diagnostics == []


def test_integers_accept_integral_decimals() -> None:
    """Test that a whole Decimal reads as an integer and a fraction does not."""
    ctx = ParseContext()
    assert require_int({"n": Decimal("4")}, "n", ctx) == 4
    assert optional_int({"n": Decimal("4.5")}, "n", ctx) is None
    assert ctx.diagnostics[0].kind == DiagnosticKind.WRONG_TYPE


def test_optional_wrong_type_returns_default_and_records() -> None:
    """Test that a wrong-typed optional field falls back with a diagnostic."""
    ctx = ParseContext()

    assert optional_float({"x": "12"}, "x", ctx, 7.0) == 7.0
    assert optional_str({"s": 5}, "s", ctx) is None
    assert optional_int({"n": "3"}, "n", ctx) is None
    assert optional_bool({"b": "yes"}, "b", ctx) is False

    assert [d.kind for d in ctx.diagnostics] == [DiagnosticKind.WRONG_TYPE] * 4
    assert ctx.diagnostics[0].field == "x"


def test_optional_absent_returns_default_silently() -> None:
    """Test that absent optional fields do not record diagnostics."""
    ctx = ParseContext()
    assert text({}, "notes", ctx) == ""
    assert optional_int({}, "n", ctx, 3) == 3
    assert str_list({}, "tips", ctx) == []
    assert str_map({}, "numbers", ctx) == {}
    assert ctx.diagnostics == []


def test_collections_drop_foreign_members() -> None:
    """Test that non-string list and map members are dropped."""
    ctx = ParseContext()
    assert str_list({"tips": ["a", 1, None, "b"]}, "tips", ctx) == ["a", "b"]
    assert str_map({"m": {"police": "110", "fire": 119}}, "m", ctx) == {"police": "110"}


def test_coerce_instant_accepts_stored_representations() -> None:
    """Test every supported timestamp shape."""
    expected = datetime(2025, 6, 10, tzinfo=timezone.utc)

    assert coerce_instant("2025-06-10T00:00:00Z") == expected
    assert coerce_instant("2025-06-10T00:00:00+00:00") == expected
    assert coerce_instant("2025-06-10") == expected
    assert coerce_instant(datetime(2025, 6, 10)) == expected
    assert coerce_instant({"seconds": 1749513600, "nanoseconds": 0}) == expected
    assert coerce_instant({"_seconds": 1749513600, "_nanoseconds": 0}) == expected
    assert coerce_instant(1749513600) == expected


def test_coerce_instant_rejects_garbage() -> None:
    """Test that unparseable values yield None."""
    assert coerce_instant("next tuesday") is None
    assert coerce_instant({"seconds": "soon"}) is None
    assert coerce_instant(math.nan) is None
    assert coerce_instant(True) is None
    assert coerce_instant(["2025-06-10"]) is None


def test_coerce_instant_rejects_oversized_numbers() -> None:
    """Test that epoch values beyond float range yield None."""
    assert coerce_instant(10**400) is None
    assert coerce_instant({"seconds": 10**400, "nanoseconds": 0}) is None
    assert coerce_instant({"seconds": 1749513600, "nanoseconds": 10**400}) is None
    with pytest.raises(WrongTypeError):
        require_instant({"startDate": 10**400}, "startDate", ParseContext())


def test_require_instant_wrong_type() -> None:
    """Test that an unparseable required instant is WrongType."""
    with pytest.raises(WrongTypeError) as exc_info:
        require_instant({"startDate": "soon"}, "startDate", ParseContext())
    assert exc_info.value.field == "startDate"


def test_resolve_tag_records_unresolvable_enum() -> None:
    """Test that an unknown tag falls back and is recorded."""
    ctx = ParseContext(path=("trip",))
    status = resolve_tag(TripStatus, {"status": "foo"}, "status", ctx)

    assert status == TripStatus.pending
    assert len(ctx.diagnostics) == 1
    assert ctx.diagnostics[0].kind == DiagnosticKind.UNRESOLVABLE_ENUM
    assert ctx.diagnostics[0].path == "trip"


def test_resolve_tag_missing_value_is_silent_default() -> None:
    """Test that an absent tag uses the default without a diagnostic."""
    ctx = ParseContext()
    assert resolve_tag(TripStatus, {}, "status", ctx) == TripStatus.pending
    assert ctx.diagnostics == []


def test_resolve_tag_prefers_first_string_value() -> None:
    """Test that a non-string value does not shadow a later string key."""
    ctx = ParseContext()
    keys = ("status", "state")

    fragment = {"status": 3, "state": "completed"}
    assert resolve_tag(TripStatus, fragment, keys, ctx) == TripStatus.completed
    assert ctx.diagnostics == []

    assert resolve_tag(TripStatus, {"status": 3}, keys, ctx) == TripStatus.pending
    assert ctx.diagnostics[0].kind == DiagnosticKind.UNRESOLVABLE_ENUM
    assert ctx.diagnostics[0].field == "status"


def test_first_of_prefers_earlier_strategies() -> None:
    """Test that strategies are tried in order."""
    fragment = {"type": "bus", "method": "train"}
    strategies = [lambda f: f.get("type"), lambda f: f.get("method")]
    assert first_of(fragment, strategies) == "bus"
    assert first_of({"method": "train"}, strategies) == "train"
    assert first_of({}, strategies) is None


def test_format_path() -> None:
    """Test document path rendering."""
    assert format_path(()) == "<root>"
    assert format_path(("a", "b", 0, "c")) == "a.b[0].c"
