"""Constants used throughout the peerloom library.

This module defines the PeeringDB API base URL, default client settings and
the namespaces identifying each PeeringDB collection endpoint.
"""

PEERLOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"peerloom/{PEERLOOM_VERSION}"

# Base URL, must end with a path separator
PEERINGDB_API_BASE_URL = "https://www.peeringdb.com/api/"

DEFAULT_TIMEOUT: float = 30.0  # Default request timeout in seconds

# Sets are returned as identifier lists instead of nested objects
DEPTH_DIRECTIVE = "depth=1"

# --- Collection namespaces ---
FACILITY = "fac"
CARRIER = "carrier"
CARRIER_FACILITY = "carrierfac"
CAMPUS = "campus"
INTERNET_EXCHANGE = "ix"
INTERNET_EXCHANGE_FACILITY = "ixfac"
INTERNET_EXCHANGE_LAN = "ixlan"
INTERNET_EXCHANGE_PREFIX = "ixpfx"
NETWORK = "net"
NETWORK_FACILITY = "netfac"
NETWORK_INTERNET_EXCHANGE_LAN = "netixlan"
ORGANIZATION = "org"
NETWORK_CONTACT = "poc"

NAMESPACES: frozenset[str] = frozenset(
    [
        FACILITY,
        CARRIER,
        CARRIER_FACILITY,
        CAMPUS,
        INTERNET_EXCHANGE,
        INTERNET_EXCHANGE_FACILITY,
        INTERNET_EXCHANGE_LAN,
        INTERNET_EXCHANGE_PREFIX,
        NETWORK,
        NETWORK_FACILITY,
        NETWORK_INTERNET_EXCHANGE_LAN,
        ORGANIZATION,
        NETWORK_CONTACT,
    ]
)

CLIENT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
}
