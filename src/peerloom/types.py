# peerloom/types.py
"""Core type aliases for the peerloom library.

This module defines the shapes shared by the query builder, the client and
the configuration layer.
"""

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any

SearchValue = str | int | bool
"""A single scalar search value. Serialized with a uniform string conversion."""

SearchParams = Mapping[str, SearchValue]
"""Search parameters sent to a collection endpoint.

Keys are case-sensitive and passed through as-is; the PeeringDB API decides
which parameters are meaningful for each namespace (e.g. ``asn``,
``name__contains``, ``country``).
"""

ConfigOption = Callable[[MutableMapping[str, Any]], None]
"""Type alias for a configuration option.

An option receives the mutable mapping of configuration fields being built
and overwrites the fields it controls. Options are applied in order, so a
later option wins over an earlier one.

Args:
    fields (MutableMapping[str, Any]): The draft configuration fields.
Return:
    None: Options modify the mapping in place.
"""
