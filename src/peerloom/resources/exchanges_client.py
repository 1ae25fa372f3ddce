# peerloom/resources/exchanges_client.py
"""Clients for the PeeringDB Internet exchange endpoints."""

from ..constants import (
    INTERNET_EXCHANGE,
    INTERNET_EXCHANGE_FACILITY,
    INTERNET_EXCHANGE_LAN,
    INTERNET_EXCHANGE_PREFIX,
)
from ..models import (
    InternetExchange,
    InternetExchangeFacility,
    InternetExchangeLAN,
    InternetExchangePrefix,
)
from .base_client import BaseResourceClient


class InternetExchangesClient(BaseResourceClient[InternetExchange]):
    """Client for the ``ix`` endpoint."""

    _namespace = INTERNET_EXCHANGE
    _entity_model = InternetExchange


class IXLANsClient(BaseResourceClient[InternetExchangeLAN]):
    """Client for the ``ixlan`` endpoint."""

    _namespace = INTERNET_EXCHANGE_LAN
    _entity_model = InternetExchangeLAN


class IXPrefixesClient(BaseResourceClient[InternetExchangePrefix]):
    """Client for the ``ixpfx`` endpoint."""

    _namespace = INTERNET_EXCHANGE_PREFIX
    _entity_model = InternetExchangePrefix


class IXFacilitiesClient(BaseResourceClient[InternetExchangeFacility]):
    """Client for the ``ixfac`` endpoint (exchange presence in facilities)."""

    _namespace = INTERNET_EXCHANGE_FACILITY
    _entity_model = InternetExchangeFacility
