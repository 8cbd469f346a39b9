"""
Constants shared by the IPv4 CIDR module.
"""

import re

MAX_UINT32 = 0xFFFFFFFF
MAX_BITS = 32
GROUP_SIZE = 8
EIGHT_BITS = 0xFF
HIGHEST_BIT_SET = 1 << (MAX_BITS - 1)

# a.b.c.d or a.b.c.d/e, 0 <= a, b, c, d <= 255 and 0 <= e <= 32
IPV4_CIDR_PATTERN = re.compile(
    r"(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
    r"(?:/(?:[0-9]|[1-2][0-9]|3[0-2]))?"
)

INVALID_IPV4_CIDR_ERROR = (
    "IP address is invalid, it should be of the format a.b.c.d or a.b.c.d/e, "
    "where 0 <= a, b, c, d < 256 and 0 <= e <= 32"
)
NON_STANDARDIZED_IP_ERROR = (
    "IP address is not standardized, the IP part of IP/CIDR should be the first IP in the range"
)
NO_MORE_SPLITTING_POSSIBLE_ERROR = (
    "There is only one IP address in this CIDR range, further splitting is not possible"
)
REQUESTED_IP_EXCEEDS_CIDR_RANGE_ERROR = "Requested IP exceeds the CIDR range"
