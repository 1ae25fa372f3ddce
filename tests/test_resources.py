"""Tests for the resource clients exposed by PeerloomClient."""

import pytest

from peerloom.client import PeerloomClient
from peerloom.constants import NAMESPACES
from peerloom.exceptions import InvalidIDError
from peerloom.models import (
    Campus,
    Carrier,
    CarrierFacility,
    Facility,
    InternetExchange,
    InternetExchangeFacility,
    InternetExchangeLAN,
    InternetExchangePrefix,
    Network,
    NetworkContact,
    NetworkFacility,
    NetworkInternetExchangeLAN,
    Organization,
)

BASE = "https://peeringdb.test/api/"

RESOURCES = [
    ("organizations", "org", Organization),
    ("campuses", "campus", Campus),
    ("facilities", "fac", Facility),
    ("carriers", "carrier", Carrier),
    ("carrier_facilities", "carrierfac", CarrierFacility),
    ("internet_exchanges", "ix", InternetExchange),
    ("ix_lans", "ixlan", InternetExchangeLAN),
    ("ix_prefixes", "ixpfx", InternetExchangePrefix),
    ("ix_facilities", "ixfac", InternetExchangeFacility),
    ("networks", "net", Network),
    ("network_facilities", "netfac", NetworkFacility),
    ("network_ix_lans", "netixlan", NetworkInternetExchangeLAN),
    ("network_contacts", "poc", NetworkContact),
]


@pytest.fixture
def client(settings) -> PeerloomClient:
    return PeerloomClient(settings=settings)


@pytest.mark.parametrize(("attribute", "namespace", "model"), RESOURCES)
def test_resource_client_binding(client: PeerloomClient, attribute, namespace, model):
    resource = getattr(client, attribute)
    assert resource._namespace == namespace
    assert resource._entity_model is model
    assert resource._api_client is client


@pytest.mark.asyncio
@pytest.mark.parametrize(("attribute", "namespace", "model"), RESOURCES)
async def test_resource_all_queries_namespace(
    client: PeerloomClient, httpx_mock, attribute, namespace, model
):
    httpx_mock.add_response(
        url=f"{BASE}{namespace}?depth=1", json={"data": [{"id": 1}, {"id": 2}]}
    )

    async with client:
        results = await getattr(client, attribute).all()

    assert [item.id for item in results] == [1, 2]
    assert all(isinstance(item, model) for item in results)


@pytest.mark.asyncio
async def test_resource_search(client: PeerloomClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE}ix?depth=1&country=NL&name__contains=AMS",
        json={"data": [{"id": 26, "name": "AMS-IX", "country": "NL"}]},
    )

    async with client:
        exchanges = await client.internet_exchanges.search(
            {"name__contains": "AMS", "country": "NL"}
        )

    assert exchanges[0].name == "AMS-IX"


@pytest.mark.asyncio
async def test_resource_get(client: PeerloomClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE}netixlan?depth=1&id=7",
        json={"data": [{"id": 7, "net_id": 42, "ixlan_id": 3, "asn": 65536}]},
    )

    async with client:
        connection = await client.network_ix_lans.get(7)

    assert connection.net_id == 42


@pytest.mark.asyncio
async def test_resource_get_missing_returns_none(client: PeerloomClient, httpx_mock):
    httpx_mock.add_response(url=f"{BASE}fac?depth=1&id=999", json={"data": []})

    async with client:
        assert await client.facilities.get(999) is None


@pytest.mark.asyncio
async def test_resource_get_invalid_id(client: PeerloomClient, httpx_mock):
    async with client:
        with pytest.raises(InvalidIDError):
            await client.organizations.get(0)

    assert httpx_mock.get_requests() == []


@pytest.mark.asyncio
async def test_networks_get_by_asn(client: PeerloomClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE}net?depth=1&asn=65536",
        json={"data": [{"id": 42, "asn": 65536, "netixlan_set": [7, 8]}]},
    )

    async with client:
        network = await client.networks.get_by_asn(65536)

    assert network.netixlan_set == [7, 8]


def test_every_namespace_has_a_resource_client():
    assert {namespace for _, namespace, _ in RESOURCES} == NAMESPACES
