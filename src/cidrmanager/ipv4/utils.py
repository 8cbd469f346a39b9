"""
Bit-level helpers for IPv4 addresses and netmasks.

Addresses are plain ints holding the 32-bit, network-order value of
a dotted quad (first octet in the most significant byte).
"""

from typing import Iterable

from cidrmanager.ipv4.consts import (
    EIGHT_BITS,
    GROUP_SIZE,
    MAX_BITS,
    MAX_UINT32,
)
from cidrmanager.ipv4.exceptions import NonStandardAddressError


def get_netmask(prefix_length: int) -> int:
    """Build the netmask for a prefix length.

    Args:
        prefix_length: Number of leading fixed bits (0-32)

    Returns:
        32-bit netmask, 0 for a /0
    """
    if prefix_length == 0:
        return 0
    return (MAX_UINT32 << (MAX_BITS - prefix_length)) & MAX_UINT32


def get_range_length(prefix_length: int) -> int:
    """Number of addresses in a block, 2 ** (32 - prefix_length)."""
    return 1 << (MAX_BITS - prefix_length)


def standardize(ip: int, netmask: int) -> int:
    """Return the first address of the range ip belongs to."""
    return ip & netmask


def is_standardized(ip: int, netmask: int) -> bool:
    """Check whether ip is the first address of its range."""
    return ip == standardize(ip, netmask)


def check_standardized(ip: int, netmask: int) -> None:
    """Raise NonStandardAddressError unless ip is the first address in range."""
    if not is_standardized(ip, netmask):
        raise NonStandardAddressError()


def pack_octets(octets: Iterable[int]) -> int:
    """Pack four octets, most significant first, into a 32-bit int."""
    ip = 0
    for octet in octets:
        ip = (ip << GROUP_SIZE) | (octet & EIGHT_BITS)
    return ip & MAX_UINT32


def format_address(ip: int) -> str:
    """Convert a 32-bit int to dotted-quad notation."""
    sections = []
    for shift in range(MAX_BITS - GROUP_SIZE, -1, -GROUP_SIZE):
        sections.append(str((ip >> shift) & EIGHT_BITS))
    return ".".join(sections)
