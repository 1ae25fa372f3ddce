"""Pydantic models for PeeringDB API objects and responses."""

from .base import ApiResponse, BaseEntity, EntityT, Meta, SocialMedia
from .campus import Campus, CampusResponse
from .carrier import Carrier, CarrierFacility, CarrierFacilityResponse, CarrierResponse
from .contact import NetworkContact, NetworkContactResponse
from .facility import Facility, FacilityResponse
from .internet_exchange import (
    InternetExchange,
    InternetExchangeFacility,
    InternetExchangeFacilityResponse,
    InternetExchangeLAN,
    InternetExchangeLANResponse,
    InternetExchangePrefix,
    InternetExchangePrefixResponse,
    InternetExchangeResponse,
)
from .network import (
    Network,
    NetworkFacility,
    NetworkFacilityResponse,
    NetworkInternetExchangeLAN,
    NetworkInternetExchangeLANResponse,
    NetworkResponse,
)
from .organization import Organization, OrganizationResponse

__all__ = [
    "ApiResponse",
    "BaseEntity",
    "Campus",
    "CampusResponse",
    "Carrier",
    "CarrierFacility",
    "CarrierFacilityResponse",
    "CarrierResponse",
    "EntityT",
    "Facility",
    "FacilityResponse",
    "InternetExchange",
    "InternetExchangeFacility",
    "InternetExchangeFacilityResponse",
    "InternetExchangeLAN",
    "InternetExchangeLANResponse",
    "InternetExchangePrefix",
    "InternetExchangePrefixResponse",
    "InternetExchangeResponse",
    "Meta",
    "Network",
    "NetworkContact",
    "NetworkContactResponse",
    "NetworkFacility",
    "NetworkFacilityResponse",
    "NetworkInternetExchangeLAN",
    "NetworkInternetExchangeLANResponse",
    "NetworkResponse",
    "Organization",
    "OrganizationResponse",
    "SocialMedia",
]
