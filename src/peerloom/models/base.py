"""Base Pydantic models for PeeringDB API entities and responses.

This module defines the envelope every PeeringDB list endpoint answers with,
the common base for all PeeringDB objects and the small shared structures
embedded in several of them.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Generic type for the entity contained within the response data
EntityT = TypeVar("EntityT", bound="BaseEntity")


class Meta(BaseModel):
    """Represents the 'meta' section of a PeeringDB response.

    The content is informational only. ``generated`` is set when the response
    was served from a pre-generated cache on the server side.

    Attributes:
        generated: Unix timestamp of the cached data, if any.
    """

    generated: float | None = None

    model_config = ConfigDict(extra="allow")


class BaseEntity(BaseModel):
    """A base Pydantic model for PeeringDB objects.

    Every PeeringDB object is identified by an integer ``id``. Fields that are
    not modelled explicitly are kept thanks to ``extra="allow"``.

    Attributes:
        id: The unique identifier of the object within its namespace.
    """

    id: int

    model_config = ConfigDict(extra="allow")


class SocialMedia(BaseModel):
    """Represents a social media link attached to a PeeringDB object.

    Attributes:
        service: The service name (e.g. "website", "linkedin").
        identifier: The account or URL on that service.
    """

    service: str | None = None
    identifier: str | None = None

    model_config = ConfigDict(extra="allow")


class ApiResponse(BaseModel, Generic[EntityT]):
    """Generic Pydantic model for PeeringDB API responses.

    PeeringDB always answers with ``{"meta": {...}, "data": [...]}``. The
    ``data`` field is required and always a list, also when a single object
    is requested by ID; an empty list means nothing matched.

    Attributes:
        meta: A `Meta` object, safe to ignore.
        data: The decoded objects, in the order returned by the API.
    """

    meta: Meta = Field(default_factory=Meta)
    data: list[EntityT]

    model_config = ConfigDict(extra="allow")
