"""IP address utilities for reverse DNS queries."""

import ipaddress

import dns.reversename


def is_valid_ipv4(ip: str) -> bool:
    """Validate if string is a valid IPv4 address.

    Args:
        ip: IP address string to validate.

    Returns:
        bool: True if valid IPv4, False otherwise.

    Examples:
        >>> is_valid_ipv4("66.249.66.1")
        True
        >>> is_valid_ipv4("256.0.0.1")
        False
        >>> is_valid_ipv4("::1")
        False
    """
    try:
        addr = ipaddress.ip_address(ip)
        return isinstance(addr, ipaddress.IPv4Address)
    except ValueError:
        return False


def parse_ipv4(ip: str) -> ipaddress.IPv4Address:
    """Parse a dotted-quad IPv4 literal.

    Args:
        ip: IPv4 address string.

    Returns:
        ipaddress.IPv4Address: Parsed address.

    Raises:
        ValueError: If IP is not a valid IPv4 address.
    """
    if not is_valid_ipv4(ip):
        raise ValueError(f"Invalid IPv4 address: {ip}")

    return ipaddress.IPv4Address(ip)


def build_reverse_query_name(ip: str) -> str:
    """Build the in-addr.arpa name used for PTR lookups.

    Octets are reversed, least significant first, and the trailing root dot
    is omitted.

    Args:
        ip: IPv4 address in dotted-quad format.

    Returns:
        str: Reverse lookup name (e.g., "4.3.2.1.in-addr.arpa").

    Raises:
        ValueError: If IP is not a valid IPv4 address.

    Examples:
        >>> build_reverse_query_name("1.2.3.4")
        '4.3.2.1.in-addr.arpa'
        >>> build_reverse_query_name("66.249.66.1")
        '1.66.249.66.in-addr.arpa'
    """
    address = parse_ipv4(ip)
    name = dns.reversename.from_address(str(address))
    return name.to_text(omit_final_dot=True)
