# peerloom/models/contact.py
"""Pydantic model for PeeringDB network contacts (``poc``)."""

from datetime import datetime

from pydantic import ConfigDict

from .base import ApiResponse, BaseEntity
from .network import Network


class NetworkContact(BaseEntity):
    """A point of contact of a network.

    Contacts with restricted visibility are only returned to authenticated
    users allowed to see them.

    Attributes:
        net_id: ID of the network.
        role: Contact role (e.g. "Technical", "Policy", "NOC").
        visible: Visibility level ("Public", "Users", "Private").
    """

    net_id: int | None = None
    net: Network | None = None
    role: str | None = None
    visible: str | None = None
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    url: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    status: str | None = None

    model_config = ConfigDict(extra="allow")


NetworkContactResponse = ApiResponse[NetworkContact]
