# peerloom/models/carrier.py
"""Pydantic models for PeeringDB Carrier objects and their facility links."""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia
from .facility import Facility
from .organization import Organization


class Carrier(BaseEntity):
    """A network able to provide transport from one facility to another."""

    org_id: int | None = None
    org_name: str | None = None
    organization: Organization | None = None
    name: str | None = None
    aka: str | None = None
    name_long: str | None = None
    website: str | None = None
    notes: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class CarrierFacility(BaseEntity):
    """Links a `Carrier` with a `Facility` it operates in.

    Attributes:
        carrier_id: ID of the carrier.
        fac_id: ID of the facility.
    """

    name: str | None = None
    carrier_id: int | None = None
    carrier: Carrier | None = None
    fac_id: int | None = None
    fac: Facility | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


CarrierResponse = ApiResponse[Carrier]
CarrierFacilityResponse = ApiResponse[CarrierFacility]
