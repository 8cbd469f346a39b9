"""
CIDR Manager - IPv4 CIDR block utilities

A small toolkit for parsing, validating, splitting and addressing
IPv4 CIDR blocks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
