# peerloom/resources/networks_client.py
"""Clients for the PeeringDB network endpoints (``net``, ``netfac``, ``netixlan``, ``poc``)."""

from ..constants import (
    NETWORK,
    NETWORK_CONTACT,
    NETWORK_FACILITY,
    NETWORK_INTERNET_EXCHANGE_LAN,
)
from ..exceptions import NotFoundError
from ..log_config import logger
from ..models import Network, NetworkContact, NetworkFacility, NetworkInternetExchangeLAN
from .base_client import BaseResourceClient


class NetworksClient(BaseResourceClient[Network]):
    """Client for the PeeringDB ``net`` endpoint.

    On top of the generic accessors it offers :meth:`get_by_asn`, the usual
    way to look a network up.
    """

    _namespace = NETWORK
    _entity_model = Network

    async def get_by_asn(self, asn: int, *, timeout: float | None = None) -> Network:
        """Returns the network announcing the given AS number.

        Unlike :meth:`get`, a missing match is an error: an ASN lookup is
        expected to be precise.

        Args:
            asn: The AS number, e.g. 65536.
            timeout: Optional deadline in seconds for this call.

        Raises:
            NotFoundError: If no network has this AS number.
        """
        logger.info(f"Fetching network for ASN {asn}")
        networks = await self.search({"asn": asn}, timeout=timeout)
        if not networks:
            raise NotFoundError(f"No network found for ASN {asn}")
        return networks[0]


class NetworkFacilitiesClient(BaseResourceClient[NetworkFacility]):
    """Client for the ``netfac`` endpoint (network presence in facilities)."""

    _namespace = NETWORK_FACILITY
    _entity_model = NetworkFacility


class NetworkIXLANsClient(BaseResourceClient[NetworkInternetExchangeLAN]):
    """Client for the ``netixlan`` endpoint (network connections to exchange LANs)."""

    _namespace = NETWORK_INTERNET_EXCHANGE_LAN
    _entity_model = NetworkInternetExchangeLAN


class NetworkContactsClient(BaseResourceClient[NetworkContact]):
    """Client for the ``poc`` endpoint."""

    _namespace = NETWORK_CONTACT
    _entity_model = NetworkContact
