# peerloom/query.py
"""Query string and URL construction for PeeringDB requests.

Every request targets ``{base}{namespace}?depth=1`` followed by the search
parameters. Parameters are emitted in alphabetical key order so the same
logical query always produces the same URL, whatever the insertion order of
the mapping.
"""

from urllib.parse import quote_plus

from .constants import DEPTH_DIRECTIVE
from .types import SearchParams, SearchValue


def format_search_value(value: SearchValue) -> str:
    """Converts a search value to its query string form.

    Booleans are rendered lowercase (``true``/``false``) as the API expects;
    every other value goes through ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_search_parameters(search: SearchParams | None) -> str:
    """Encodes search parameters as a query string fragment.

    Each ``key=value`` pair is prefixed with ``&`` so the result can be
    appended directly after the depth directive. Keys and values are
    both percent-escaped.

    Args:
        search: Mapping of parameter names to scalar values, or None.

    Returns:
        str: ``""`` for a missing or empty mapping, otherwise e.g.
            ``"&asn=65536&id=10"``.
    """
    if not search:
        return ""
    return "".join(
        f"&{quote_plus(key)}={quote_plus(format_search_value(search[key]))}"
        for key in sorted(search)
    )


def build_url(base: str, namespace: str, search: SearchParams | None = None) -> str:
    """Builds the request URL for a namespace.

    Args:
        base: The API root. Used as-is, it is expected to end with '/'.
        namespace: The collection to query (e.g. ``"net"``).
        search: Optional search parameters.

    Returns:
        str: e.g. ``"https://www.peeringdb.com/api/net?depth=1&asn=65536"``.
    """
    return f"{base}{namespace}?{DEPTH_DIRECTIVE}{encode_search_parameters(search)}"
