"""Exception types raised while reading raw trip documents."""

from collections.abc import Sequence

PathPart = str | int


def format_path(path: Sequence[PathPart]) -> str:
    """Render a document path as ``a.b[0].c``."""
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = part
    return rendered or "<root>"


class DocumentParseError(Exception):
    """A fragment could not be turned into a typed entity."""

    def __init__(self, message: str, *, path: Sequence[PathPart] = (), field: str | None = None):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)
        self.field = field

    @property
    def location(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        return f"{self.message} (at {self.location})"


class MissingFieldError(DocumentParseError):
    """Required field is absent or null."""

    def __init__(self, field: str, *, path: Sequence[PathPart] = ()):
        super().__init__(f"Missing required field '{field}'", path=path, field=field)


class WrongTypeError(DocumentParseError):
    """Field is present but not coercible to the expected type."""

    def __init__(self, field: str, expected: str, actual: object, *, path: Sequence[PathPart] = ()):
        self.expected = expected
        self.actual = type(actual).__name__
        super().__init__(
            f"Field '{field}' expected {expected}, got {self.actual}",
            path=path,
            field=field,
        )


class TripRejectedError(DocumentParseError):
    """Trip document is unusable because a required top-level field failed.

    The originating MissingFieldError/WrongTypeError is chained as __cause__.
    """

    def __init__(self, cause: DocumentParseError, *, trip_id: str | None = None):
        self.trip_id = trip_id
        self.cause = cause
        super().__init__(
            f"Trip rejected: {cause.message}",
            path=cause.path,
            field=cause.field,
        )
