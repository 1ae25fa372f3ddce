# peerloom/models/internet_exchange.py
"""Pydantic models for PeeringDB Internet exchange objects.

An exchange (``ix``) owns one or more LANs (``ixlan``), each LAN announces
one or more prefixes (``ixpfx``), and ``ixfac`` records tell in which
facilities the exchange is present.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from .base import ApiResponse, BaseEntity, SocialMedia
from .facility import Facility
from .organization import Organization


class InternetExchange(BaseEntity):
    """Model representing an Internet exchange point.

    Attributes:
        org_id: ID of the organization managing the exchange.
        media: Exchange fabric media type (e.g. "Ethernet").
        proto_unicast: Whether unicast IPv4 peering is supported.
        proto_multicast: Whether multicast peering is supported.
        proto_ipv6: Whether IPv6 peering is supported.
        fac_set: IDs of the facilities the exchange is present in.
        ixlan_set: IDs of the exchange LANs.
        ixf_last_import: Last time the IX-F member export was imported.
    """

    org_id: int | None = None
    org: Organization | None = None
    name: str | None = None
    aka: str | None = None
    name_long: str | None = None
    city: str | None = None
    country: str | None = None
    region_continent: str | None = None
    media: str | None = None
    notes: str | None = None
    proto_unicast: bool | None = None
    proto_multicast: bool | None = None
    proto_ipv6: bool | None = None
    website: str | None = None
    url_stats: str | None = None
    tech_email: str | None = None
    tech_phone: str | None = None
    policy_email: str | None = None
    policy_phone: str | None = None
    sales_phone: str | None = None
    sales_email: str | None = None
    fac_set: list[int] | None = Field(default_factory=list)
    ixlan_set: list[int] | None = Field(default_factory=list)
    net_count: int | None = None
    fac_count: int | None = None
    ixf_net_count: int | None = None
    ixf_last_import: datetime | None = None
    ixf_import_request: datetime | None = None
    ixf_import_request_status: str | None = None
    service_level: str | None = None
    terms: str | None = None
    status_dashboard: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None
    social_media: list[SocialMedia] | None = Field(default_factory=list)

    model_config = ConfigDict(extra="allow")


class InternetExchangeLAN(BaseEntity):
    """One of the LANs of an exchange, with its MTU, VLAN support, etc.

    Attributes:
        ix_id: ID of the exchange.
        descr: Free text description.
        rs_asn: ASN of the exchange route servers.
        net_set: IDs of the networks connected to the LAN.
        ixpfx_set: IDs of the prefixes used on the LAN.
    """

    ix_id: int | None = None
    ix: InternetExchange | None = None
    name: str | None = None
    descr: str | None = None
    mtu: int | None = None
    dot1q_support: bool | None = None
    rs_asn: int | None = None
    arp_sponge: str | None = None
    net_set: list[int] | None = Field(default_factory=list)
    ixpfx_set: list[int] | None = Field(default_factory=list)
    ixf_ixp_member_list_url: str | None = None
    ixf_ixp_member_list_url_visible: str | None = None
    ixf_ixp_import_enabled: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


class InternetExchangePrefix(BaseEntity):
    """A prefix used on an exchange LAN."""

    ixlan_id: int | None = None
    ixlan: InternetExchangeLAN | None = None
    protocol: str | None = None
    prefix: str | None = None
    in_dfz: bool | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


class InternetExchangeFacility(BaseEntity):
    """Links an exchange with a facility where it can be reached."""

    name: str | None = None
    city: str | None = None
    country: str | None = None
    ix_id: int | None = None
    ix: InternetExchange | None = None
    fac_id: int | None = None
    fac: Facility | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


InternetExchangeResponse = ApiResponse[InternetExchange]
InternetExchangeLANResponse = ApiResponse[InternetExchangeLAN]
InternetExchangePrefixResponse = ApiResponse[InternetExchangePrefix]
InternetExchangeFacilityResponse = ApiResponse[InternetExchangeFacility]
