"""
IPv4 Network Module

Provides the network class classifier, reserved address detection, subnet
arithmetic and the subnet and address enumerations.
"""

from snet.ip.core import (
    Address,
    AddressKind,
    AddressType,
    Class,
    Network,
    ReservedAddress,
    classify,
    detect_reserved,
    parse_cidr,
)

__all__ = [
    "Address",
    "AddressKind",
    "AddressType",
    "Class",
    "Network",
    "ReservedAddress",
    "classify",
    "detect_reserved",
    "parse_cidr",
]
