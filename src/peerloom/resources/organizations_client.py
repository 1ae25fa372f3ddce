# peerloom/resources/organizations_client.py
"""Client for the PeeringDB ``org`` endpoint."""

from ..constants import ORGANIZATION
from ..models import Organization
from .base_client import BaseResourceClient


class OrganizationsClient(BaseResourceClient[Organization]):
    """Client for the ``org`` endpoint.

    Organizations list the IDs of everything they own (``net_set``,
    ``fac_set``, ...); resolve those with the matching client's ``get``.
    """

    _namespace = ORGANIZATION
    _entity_model = Organization
