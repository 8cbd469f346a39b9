"""
Exceptions raised by IPv4 CIDR operations.
"""

from cidrmanager.ipv4.consts import (
    INVALID_IPV4_CIDR_ERROR,
    NON_STANDARDIZED_IP_ERROR,
    NO_MORE_SPLITTING_POSSIBLE_ERROR,
    REQUESTED_IP_EXCEEDS_CIDR_RANGE_ERROR,
)


class CIDRError(ValueError):
    """Base exception for CIDR errors."""
    default_message = "Invalid CIDR operation"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class InvalidFormatError(CIDRError):
    """Input text is not of the form a.b.c.d or a.b.c.d/e."""
    default_message = INVALID_IPV4_CIDR_ERROR


class NonStandardAddressError(CIDRError):
    """Address is not the first address of its range."""
    default_message = NON_STANDARDIZED_IP_ERROR


class NotSplittableError(CIDRError):
    """Block holds a single address."""
    default_message = NO_MORE_SPLITTING_POSSIBLE_ERROR


class OutOfRangeError(CIDRError):
    """Requested address lies outside the block."""
    default_message = REQUESTED_IP_EXCEEDS_CIDR_RANGE_ERROR
