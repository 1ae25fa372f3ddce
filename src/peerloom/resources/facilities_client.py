# peerloom/resources/facilities_client.py
"""Clients for the PeeringDB facility, campus and carrier endpoints."""

from ..constants import CAMPUS, CARRIER, CARRIER_FACILITY, FACILITY
from ..models import Campus, Carrier, CarrierFacility, Facility
from .base_client import BaseResourceClient


class FacilitiesClient(BaseResourceClient[Facility]):
    """Client for the ``fac`` endpoint."""

    _namespace = FACILITY
    _entity_model = Facility


class CampusesClient(BaseResourceClient[Campus]):
    """Client for the ``campus`` endpoint."""

    _namespace = CAMPUS
    _entity_model = Campus


class CarriersClient(BaseResourceClient[Carrier]):
    """Client for the ``carrier`` endpoint."""

    _namespace = CARRIER
    _entity_model = Carrier


class CarrierFacilitiesClient(BaseResourceClient[CarrierFacility]):
    """Client for the ``carrierfac`` endpoint (carrier presence in facilities)."""

    _namespace = CARRIER_FACILITY
    _entity_model = CarrierFacility
