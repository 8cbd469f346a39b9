"""
IPv4 CIDR Module

Provides parsing, validation, splitting and addressing of IPv4 CIDR blocks.
"""

from cidrmanager.ipv4.core import (
    IPv4CIDR,
    parse_cidr,
)
from cidrmanager.ipv4.exceptions import (
    CIDRError,
    InvalidFormatError,
    NonStandardAddressError,
    NotSplittableError,
    OutOfRangeError,
)

__all__ = [
    "IPv4CIDR",
    "parse_cidr",
    "CIDRError",
    "InvalidFormatError",
    "NonStandardAddressError",
    "NotSplittableError",
    "OutOfRangeError",
]
