"""Unit tests for IP utility functions."""

import ipaddress

import pytest

from src.utils.ip_utils import build_reverse_query_name, is_valid_ipv4, parse_ipv4


def test_is_valid_ipv4_valid():
    """Test validation of valid IPv4 addresses."""
    assert is_valid_ipv4("66.249.66.1") is True
    assert is_valid_ipv4("192.168.1.1") is True
    assert is_valid_ipv4("0.0.0.0") is True
    assert is_valid_ipv4("255.255.255.255") is True


@pytest.mark.parametrize(
    "value",
    [
        "256.0.0.1",  # Out of range
        "192.168.1",  # Incomplete
        "1.2.3.4.5",  # Too many octets
        "::1",  # IPv6
        "crawl-66-249-66-1.googlebot.com",  # Hostname
        "not an ip",
        "",
        " 1.2.3.4",
        "01.2.3.4",  # Leading zero
    ],
)
def test_is_valid_ipv4_invalid(value):
    """Test validation rejects anything but a dotted-quad IPv4 literal."""
    assert is_valid_ipv4(value) is False


def test_parse_ipv4():
    """Test parsing returns an IPv4Address."""
    assert parse_ipv4("66.249.66.1") == ipaddress.IPv4Address("66.249.66.1")


def test_parse_ipv4_invalid():
    """Test parse_ipv4 raises ValueError for invalid IPs."""
    with pytest.raises(ValueError, match="Invalid IPv4 address"):
        parse_ipv4("::1")


def test_build_reverse_query_name():
    """Test octets are reversed and in-addr.arpa appended."""
    assert build_reverse_query_name("1.2.3.4") == "4.3.2.1.in-addr.arpa"
    assert build_reverse_query_name("66.249.66.1") == "1.66.249.66.in-addr.arpa"
    assert build_reverse_query_name("8.8.8.8") == "8.8.8.8.in-addr.arpa"


def test_build_reverse_query_name_invalid_ip():
    """Test build_reverse_query_name raises ValueError for invalid IP."""
    with pytest.raises(ValueError, match="Invalid IPv4 address"):
        build_reverse_query_name("256.0.0.1")
