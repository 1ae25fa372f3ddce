# peerloom/models/campus.py
"""Pydantic model for PeeringDB Campus objects."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia
from .organization import Organization


class Campus(BaseEntity):
    """A site grouping several facilities operated close to each other.

    Attributes:
        org_id: ID of the owning organization.
        organization: The owning organization, only present when the API
            expands it (never with ``depth=1``).
        fac_set: IDs of the facilities that are part of the campus.
    """

    org_id: int | None = None
    org_name: str | None = None
    organization: Organization | None = None
    name: str | None = None
    name_long: str | None = None
    aka: str | None = None
    website: str | None = None
    notes: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    zipcode: str | None = None
    fac_set: list[int] | None = Field(default_factory=list)
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


CampusResponse = ApiResponse[Campus]
