# peerloom/resources/__init__.py
"""Exposes the resource client classes."""

from .base_client import BaseResourceClient
from .exchanges_client import (
    InternetExchangesClient,
    IXFacilitiesClient,
    IXLANsClient,
    IXPrefixesClient,
)
from .facilities_client import (
    CampusesClient,
    CarrierFacilitiesClient,
    CarriersClient,
    FacilitiesClient,
)
from .networks_client import (
    NetworkContactsClient,
    NetworkFacilitiesClient,
    NetworkIXLANsClient,
    NetworksClient,
)
from .organizations_client import OrganizationsClient

__all__ = [
    "BaseResourceClient",
    "CampusesClient",
    "CarrierFacilitiesClient",
    "CarriersClient",
    "FacilitiesClient",
    "InternetExchangesClient",
    "IXFacilitiesClient",
    "IXLANsClient",
    "IXPrefixesClient",
    "NetworkContactsClient",
    "NetworkFacilitiesClient",
    "NetworkIXLANsClient",
    "NetworksClient",
    "OrganizationsClient",
]
