"""Tests for URL and query string construction."""

import pytest

from peerloom.query import build_url, encode_search_parameters, format_search_value


def test_encode_sorts_keys_whatever_the_insertion_order():
    assert encode_search_parameters({"id": 10, "asn": 65536}) == "&asn=65536&id=10"
    assert encode_search_parameters({"asn": 65536, "id": 10}) == "&asn=65536&id=10"


@pytest.mark.parametrize("search", [None, {}])
def test_encode_empty_search_is_empty_string(search):
    assert encode_search_parameters(search) == ""


def test_build_url_without_search_equals_empty_search():
    base = "https://host/api/"
    assert build_url(base, "net", {}) == build_url(base, "net", None)
    assert build_url(base, "net") == "https://host/api/net?depth=1"


def test_build_url_composition():
    assert (
        build_url("https://host/api/", "net", {"id": 10})
        == "https://host/api/net?depth=1&id=10"
    )


def test_values_are_percent_escaped():
    encoded = encode_search_parameters({"name__contains": "Example & Co/IX"})
    assert encoded == "&name__contains=Example+%26+Co%2FIX"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(True, "true"), (False, "false"), (65536, "65536"), ("Open", "Open")],
)
def test_format_search_value(value, expected):
    assert format_search_value(value) == expected


def test_boolean_values_are_lowercase_in_query():
    assert encode_search_parameters({"info_ipv6": True}) == "&info_ipv6=true"


def test_keys_are_percent_escaped():
    assert encode_search_parameters({"a&b": "x", "name": "y"}) == "&a%26b=x&name=y"
    assert encode_search_parameters({"a=b c#": 1}) == "&a%3Db+c%23=1"
