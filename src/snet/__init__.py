"""
snet4 - IPv4 Subnet Calculator

Determines the class of an IPv4 network, its number of subnets and hosts per
subnet, and enumerates every subnet, host and broadcast address. Most useful
when subnet boundaries cross an octet and are hard to read in dotted decimal.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
