"""Parse context, diagnostics, and failure-isolation combinators.

Every optional nested structure goes through ``parse_optional`` and every
list of entities through ``parse_items``, so a failure inside them is
recorded and contained instead of propagating to the parent.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from wandermint.errors import DocumentParseError, PathPart, format_path
from wandermint.utils.logging import StructuredParseLogger
from wandermint.utils.metrics import PrometheusParseMetrics

T = TypeVar("T")

Fragment = Mapping[str, Any]
FragmentParser = Callable[[Fragment, "ParseContext"], T]

_log = StructuredParseLogger()
_metrics = PrometheusParseMetrics()


class DiagnosticKind(str, Enum):
    """What went wrong while reading a fragment."""

    MISSING_FIELD = "missing_field"
    WRONG_TYPE = "wrong_type"
    UNRESOLVABLE_ENUM = "unresolvable_enum"
    STRUCTURE_DROPPED = "structure_dropped"
    ITEM_SKIPPED = "item_skipped"


@dataclass(frozen=True)
class Diagnostic:
    """A recovered parse problem, kept for debugging."""

    kind: DiagnosticKind
    path: str
    message: str
    field: str | None = None


@dataclass
class ParseContext:
    """Location within the document plus the diagnostics sink of one parse call."""

    path: tuple[PathPart, ...] = ()
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def child(self, *parts: PathPart) -> "ParseContext":
        """Context for a nested fragment, sharing the diagnostics list."""
        return ParseContext(path=self.path + parts, diagnostics=self.diagnostics)

    @property
    def location(self) -> str:
        return format_path(self.path)

    def record(self, kind: DiagnosticKind, message: str, field: str | None = None) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, path=self.location, message=message, field=field)
        self.diagnostics.append(diagnostic)
        return diagnostic

    def record_error(self, kind: DiagnosticKind, error: DocumentParseError) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, path=error.location, message=str(error), field=error.field)
        self.diagnostics.append(diagnostic)
        return diagnostic


def drop_structure(ctx: ParseContext, structure: str, reason: str) -> None:
    """Record, log and count an optional structure parsed as absent."""
    ctx.record(DiagnosticKind.STRUCTURE_DROPPED, f"{structure}: {reason}")
    _log.log_dropped_structure(structure, ctx.location, reason)
    _metrics.inc_dropped_structure(structure)


def skip_item(ctx: ParseContext, collection: str, reason: str) -> None:
    """Record, log and count a list member left out of its collection."""
    ctx.record(DiagnosticKind.ITEM_SKIPPED, f"{collection}: {reason}")
    _log.log_skipped_item(collection, ctx.location, reason)
    _metrics.inc_skipped_item(collection)


def parse_optional(
    parser: FragmentParser[T],
    raw: Any,
    ctx: ParseContext,
    structure: str,
) -> T | None:
    """Parse an optional sub-structure; any failure yields ``None``.

    Args:
        parser: Entity parser taking ``(fragment, ctx)``
        raw: Raw value stored under the structure's key (may be absent)
        ctx: Context already pointing at the structure
        structure: Name used in diagnostics, logs and metrics

    Returns:
        The parsed entity, or None when absent or malformed
    """
    if raw is None:
        return None

    if not isinstance(raw, Mapping):
        drop_structure(ctx, structure, f"expected mapping, got {type(raw).__name__}")
        return None

    try:
        return parser(raw, ctx)
    except DocumentParseError as exc:
        drop_structure(ctx, structure, str(exc))
        return None


def parse_items(
    parser: FragmentParser[T],
    raw: Any,
    ctx: ParseContext,
    collection: str,
) -> list[T]:
    """Parse a list of fragments, skipping members that fail.

    A non-list value is treated as an empty list and recorded.
    """
    if raw is None:
        return []

    if not isinstance(raw, list):
        drop_structure(ctx, collection, f"expected list, got {type(raw).__name__}")
        return []

    items: list[T] = []
    for index, item in enumerate(raw):
        item_ctx = ctx.child(index)
        if not isinstance(item, Mapping):
            skip_item(item_ctx, collection, f"expected mapping, got {type(item).__name__}")
            continue
        try:
            items.append(parser(item, item_ctx))
        except DocumentParseError as exc:
            skip_item(item_ctx, collection, str(exc))
    return items
