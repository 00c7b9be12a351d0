"""Base model and small value types shared across all document models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Immutable entity read from a stored document.

    Dumps with ``by_alias=True`` use the camelCase keys of the stored
    document; construction accepts the Python field names.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class LocationCoordinates(DocumentModel):
    """WGS84 coordinates."""

    latitude: float
    longitude: float


class ActivityLocation(DocumentModel):
    """Named place with a free-text address."""

    name: str = ""
    address: str = ""
    coordinates: LocationCoordinates | None = None
    nearby_landmarks: str | None = None


class ContactInfo(DocumentModel):
    """Contact channels for a venue."""

    phone: str | None = None
    email: str | None = None
    website: str | None = None
