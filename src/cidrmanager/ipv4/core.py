"""
Core IPv4 CIDR functionality.
"""

from dataclasses import dataclass

from netaddr import IPNetwork

from cidrmanager.ipv4.consts import (
    HIGHEST_BIT_SET,
    IPV4_CIDR_PATTERN,
    MAX_BITS,
    MAX_UINT32,
)
from cidrmanager.ipv4.exceptions import (
    InvalidFormatError,
    NotSplittableError,
    OutOfRangeError,
)
from cidrmanager.ipv4.utils import (
    check_standardized,
    format_address,
    get_netmask,
    get_range_length,
    pack_octets,
    standardize as standardize_ip,
)


@dataclass(frozen=True)
class IPv4CIDR:
    """An IPv4 CIDR block in standard form.

    ``ip`` is always the first address of the range. Netmask and range
    size are derived from ``prefix_length``.
    """
    ip: int
    prefix_length: int = MAX_BITS

    def __post_init__(self):
        if not 0 <= self.prefix_length <= MAX_BITS:
            raise InvalidFormatError(f"Prefix length /{self.prefix_length} is outside 0-{MAX_BITS}")
        if not 0 <= self.ip <= MAX_UINT32:
            raise InvalidFormatError(f"Address {self.ip} does not fit in 32 bits")
        check_standardized(self.ip, self.netmask_int)

    def __str__(self) -> str:
        return self.to_string()

    @property
    def netmask_int(self) -> int:
        return get_netmask(self.prefix_length)

    @property
    def range_size(self) -> int:
        """Number of addresses in the block (2 ** 32 for a /0)."""
        return get_range_length(self.prefix_length)

    @property
    def address(self) -> str:
        """First address of the block, as a dotted quad."""
        return format_address(self.ip)

    @property
    def netmask(self) -> str:
        return format_address(self.netmask_int)

    @property
    def last_address(self) -> str:
        return format_address(self.ip + self.range_size - 1)

    def to_string(self) -> str:
        return f"{self.address}/{self.prefix_length}"

    def split(self) -> tuple["IPv4CIDR", "IPv4CIDR"]:
        """Split the block into its lower and upper halves.

        Raises:
            NotSplittableError: If the block holds a single address
        """
        if self.range_size == 1:
            raise NotSplittableError()

        netmask = self.netmask_int
        # One more leading bit becomes fixed
        new_netmask = (netmask >> 1) | HIGHEST_BIT_SET

        lower = IPv4CIDR(ip=self.ip, prefix_length=self.prefix_length + 1)
        upper = IPv4CIDR(
            ip=self.ip | (new_netmask ^ netmask),
            prefix_length=self.prefix_length + 1,
        )
        return lower, upper

    def nth_address(self, n: int, with_prefix: bool = False) -> str:
        """Return the nth address of the block, counting from 1.

        Args:
            n: Position in the range, 1 is the block's own address
            with_prefix: Append "/<prefix_length>" to the result

        Raises:
            TypeError: If n is not an int
            OutOfRangeError: If n is below 1 or beyond the range size
        """
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError(f"n must be an int, not {type(n).__name__}")
        if n < 1 or n > self.range_size:
            raise OutOfRangeError()

        nth_ip = format_address(self.ip + n - 1)
        if with_prefix:
            return f"{nth_ip}/{self.prefix_length}"
        return nth_ip

    def contains(self, other: "IPv4CIDR | str") -> bool:
        """Check if an address or block lies entirely inside this block.

        String input is parsed strictly, so "10.0.0.1/24" is rejected.
        """
        if not isinstance(other, IPv4CIDR):
            other = parse_cidr(other)
        return (
            self.ip <= other.ip
            and other.ip + other.range_size <= self.ip + self.range_size
        )

    def to_ipnetwork(self) -> IPNetwork:
        """Convert to a netaddr IPNetwork."""
        return IPNetwork(self.to_string(), version=4)


def parse_cidr(text: str, standardize: bool = False) -> IPv4CIDR:
    """Parse a.b.c.d or a.b.c.d/e into an IPv4CIDR.

    The prefix defaults to /32 when omitted.

    Args:
        text: CIDR text
        standardize: Replace the address with the first address of its
            range instead of rejecting it

    Returns:
        IPv4CIDR in standard form

    Raises:
        InvalidFormatError: If text is not valid CIDR notation
        NonStandardAddressError: If the address is not the first in its
            range and standardize is False
    """
    if not isinstance(text, str) or IPV4_CIDR_PATTERN.fullmatch(text) is None:
        raise InvalidFormatError()

    address, _, prefix = text.partition("/")
    prefix_length = int(prefix) if prefix else MAX_BITS
    ip = pack_octets(int(octet) for octet in address.split("."))

    if standardize:
        ip = standardize_ip(ip, get_netmask(prefix_length))

    return IPv4CIDR(ip=ip, prefix_length=prefix_length)
