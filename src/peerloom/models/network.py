# peerloom/models/network.py
"""Pydantic models for PeeringDB Network objects and their relationships.

A network is an Autonomous System. It belongs to an organization, has
contacts (``poc``), is present in facilities (``netfac``) and connected to
exchange LANs (``netixlan``).
Reference: https://docs.peeringdb.com/api_specs/
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia
from .facility import Facility
from .internet_exchange import InternetExchange, InternetExchangeLAN
from .organization import Organization


class Network(BaseEntity):
    """Model representing an Autonomous System identified by its AS number.

    Attributes:
        org_id: ID of the owning organization.
        asn: The AS number.
        irr_as_set: IRR AS-SET or route-set of the network.
        info_type: Deprecated single network type, see ``info_types``.
        info_types: Network types (e.g. "NSP", "Content").
        info_prefixes4: Recommended IPv4 max-prefix.
        info_prefixes6: Recommended IPv6 max-prefix.
        policy_general: General peering policy ("Open", "Selective", ...).
        netfac_set: IDs of the network's facility presences.
        netixlan_set: IDs of the network's exchange LAN connections.
        poc_set: IDs of the network's contacts.
    """

    org_id: int | None = None
    org: Organization | None = None
    name: str | None = None
    aka: str | None = None
    name_long: str | None = None
    website: str | None = None
    asn: int | None = None
    looking_glass: str | None = None
    route_server: str | None = None
    irr_as_set: str | None = None
    info_type: str | None = None
    info_types: list[str] | None = Field(default_factory=list)
    info_prefixes4: int | None = None
    info_prefixes6: int | None = None
    info_traffic: str | None = None
    info_ratio: str | None = None
    info_scope: str | None = None
    info_unicast: bool | None = None
    info_multicast: bool | None = None
    info_ipv6: bool | None = None
    info_never_via_route_servers: bool | None = None
    ix_count: int | None = None
    fac_count: int | None = None
    notes: str | None = None
    netixlan_updated: datetime | None = None
    netfac_updated: datetime | None = None
    poc_updated: datetime | None = None
    policy_url: str | None = None
    policy_general: str | None = None
    policy_locations: str | None = None
    policy_ratio: bool | None = None
    policy_contracts: str | None = None
    netfac_set: list[int] | None = Field(default_factory=list)
    netixlan_set: list[int] | None = Field(default_factory=list)
    poc_set: list[int] | None = Field(default_factory=list)
    allow_ixp_update: bool | None = None
    status_dashboard: str | None = None
    rir_status: str | None = None
    rir_status_updated: datetime | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class NetworkFacility(BaseEntity):
    """Links a network with a facility it is present in.

    Useful to find common facilities between networks, where they can
    interconnect directly.
    """

    name: str | None = None
    city: str | None = None
    country: str | None = None
    net_id: int | None = None
    net: Network | None = None
    fac_id: int | None = None
    fac: Facility | None = None
    local_asn: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


class NetworkInternetExchangeLAN(BaseEntity):
    """A network's connection to an exchange LAN.

    Attributes:
        speed: Port speed in Mbit/s.
        ipaddr4: IPv4 address of the connection, if any.
        ipaddr6: IPv6 address of the connection, if any.
        is_rs_peer: Whether the network peers with the route servers.
    """

    net_id: int | None = None
    net: Network | None = None
    ix_id: int | None = None
    ix: InternetExchange | None = None
    name: str | None = None
    ixlan_id: int | None = None
    ixlan: InternetExchangeLAN | None = None
    notes: str | None = None
    speed: int | None = None
    asn: int | None = None
    ipaddr4: str | None = None
    ipaddr6: str | None = None
    is_rs_peer: bool | None = None
    bfd_support: bool | None = None
    operational: bool | None = None
    net_side_id: int | None = None
    ix_side_id: int | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


NetworkResponse = ApiResponse[Network]
NetworkFacilityResponse = ApiResponse[NetworkFacility]
NetworkInternetExchangeLANResponse = ApiResponse[NetworkInternetExchangeLAN]
