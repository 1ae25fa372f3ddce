# peerloom/models/facility.py
"""Pydantic model for PeeringDB Facility objects.

A facility is a location where networks and internet exchange points are
present, most of the time a datacenter.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia
from .campus import Campus
from .organization import Organization


class Facility(BaseEntity):
    """Model representing a PeeringDB Facility (datacenter).

    Attributes:
        org_id: ID of the operating organization.
        campus_id: ID of the campus the facility belongs to, if any.
        clli: CLLI code of the facility.
        net_count: Number of networks present.
        ix_count: Number of exchanges present.
        carrier_count: Number of carriers present.
        available_voltage_services: Power voltages offered.
        region_continent: Continent the facility is located on.
    """

    org_id: int | None = None
    org_name: str | None = None
    organization: Organization | None = None
    campus_id: int | None = None
    campus: Campus | None = None
    name: str | None = None
    aka: str | None = None
    name_long: str | None = None
    website: str | None = None
    clli: str | None = None
    rencode: str | None = None
    npanxx: str | None = None
    notes: str | None = None
    net_count: int | None = None
    ix_count: int | None = None
    carrier_count: int | None = None
    sales_email: str | None = None
    sales_phone: str | None = None
    tech_email: str | None = None
    tech_phone: str | None = None
    available_voltage_services: list[str] | None = Field(default_factory=list)
    diverse_serving_substations: bool | None = None
    property: str | None = None
    region_continent: str | None = None
    status_dashboard: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
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
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


FacilityResponse = ApiResponse[Facility]
"""Type alias for an API response containing a list of `Facility` objects."""
