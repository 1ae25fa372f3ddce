# peerloom/models/organization.py
"""Pydantic model for PeeringDB Organization objects.

Reference: https://www.peeringdb.com/apidocs/#tag/api/operation/list%20org
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia


class Organization(BaseEntity):
    """An enterprise owning networks, facilities, exchanges, carriers or campuses.

    The ``*_set`` fields hold identifiers of the related objects, which can be
    resolved with the matching resource client.
    """

    name: str | None = None
    aka: str | None = None
    name_long: str | None = None
    website: str | None = None
    notes: str | None = None
    require_2fa: bool | None = None
    net_set: list[int] | None = Field(default_factory=list)
    fac_set: list[int] | None = Field(default_factory=list)
    ix_set: list[int] | None = Field(default_factory=list)
    carrier_set: list[int] | None = Field(default_factory=list)
    campus_set: list[int] | None = Field(default_factory=list)
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    country: str | None = None
    state: str | None = None
    zipcode: str | None = None
    floor: str | None = None
    suite: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


OrganizationResponse = ApiResponse[Organization]
"""Type alias for an API response containing a list of `Organization` objects."""
