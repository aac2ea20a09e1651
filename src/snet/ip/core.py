"""
Core IPv4 network model.

Classifies addresses into the historical A-E classes, rejects reserved base
addresses, and derives masks, subnet/host counts and the lazy subnet and
address enumerations of a network.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from netaddr import IPAddress

from snet.errors import InvalidAddressError, InvalidSubnetMaskError, ReservedAddressError

logger = logging.getLogger(__name__)

ADDRESS_BITS = 32
ALL_ONES = 0xFFFFFFFF


def _invert(value: int) -> int:
    """Bitwise NOT within 32 bits."""
    return ~value & ALL_ONES


def _top_bits(count: int) -> int:
    """Mask with the top ``count`` bits set (``count`` in 1..32)."""
    return (ALL_ONES << (ADDRESS_BITS - count)) & ALL_ONES


# =============================================================================
# Enumerations
# =============================================================================

class Class(str, Enum):
    """Historical IPv4 network classes."""
    A = "A"  # N.H.H.H
    B = "B"  # N.N.H.H
    C = "C"  # N.N.N.H
    D = "D"  # Multicast
    E = "E"  # Reserved use

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        return f"class {self.value} network"

    @property
    def mask(self) -> int:
        return _CLASS_TABLE[self][0]

    @property
    def pattern(self) -> int:
        return _CLASS_TABLE[self][1]

    @property
    def network_bits(self) -> int | None:
        """Bits in the class-implied network part; None for D and E."""
        return _CLASS_TABLE[self][2]


# class -> (mask, pattern, network bits), longest mask first
_CLASS_TABLE: dict[Class, tuple[int, int, int | None]] = {
    Class.E: (0b11110000 << 24, 0b11110000 << 24, None),
    Class.D: (0b11110000 << 24, 0b11100000 << 24, None),
    Class.C: (0b11100000 << 24, 0b11000000 << 24, 24),
    Class.B: (0b11000000 << 24, 0b10000000 << 24, 16),
    Class.A: (0b10000000 << 24, 0b00000000 << 24, 8),
}


class ReservedAddress(str, Enum):
    """Address blocks that can never be a network base."""
    LOOPBACK = "loopback"  # 127.0.0.0/8, the whole block and not just 127.0.0.1
    LOCAL_BROADCAST = "local broadcast"  # 255.255.255.255/32

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        return self.value

    @property
    def mask(self) -> int:
        return _RESERVED_TABLE[self][0]

    @property
    def pattern(self) -> int:
        return _RESERVED_TABLE[self][1]


# most specific first
_RESERVED_TABLE: dict[ReservedAddress, tuple[int, int]] = {
    ReservedAddress.LOCAL_BROADCAST: (ALL_ONES, ALL_ONES),
    ReservedAddress.LOOPBACK: (0xFF000000, 0x7F000000),
}


def classify(address: int) -> Class:
    """Return the network class of a 32-bit address.

    Every address matches exactly one class: the table is scanned longest
    pattern first and class A catches everything left.
    """
    for network_class, (mask, pattern, _) in _CLASS_TABLE.items():
        if address & mask == pattern:
            return network_class
    raise AssertionError(f"unclassifiable address {address:#010x}")


def detect_reserved(address: int) -> ReservedAddress | None:
    """Return the reserved block containing ``address``, if any."""
    for reserved, (mask, pattern) in _RESERVED_TABLE.items():
        if address & mask == pattern:
            return reserved
    return None


# =============================================================================
# Addresses
# =============================================================================

@dataclass(frozen=True, order=True)
class Address:
    """A single IPv4 address as an unsigned 32-bit value."""
    value: int

    def __str__(self) -> str:
        return str(IPAddress(self.value, 4))

    def __repr__(self) -> str:
        return self.debug

    def __format__(self, spec: str) -> str:
        if spec == "b":
            return self.binary
        return format(str(self), spec)

    @property
    def binary(self) -> str:
        return f"{self.value:032b}"

    @property
    def debug(self) -> str:
        return f"{self.binary} - {str(self):>15}"


class AddressKind(str, Enum):
    """Role of an address inside a network."""
    NETWORK = "network"
    SUBNET = "subnet"
    HOST = "host"
    SUBNET_BROADCAST = "subnet broadcast"
    NETWORK_BROADCAST = "network broadcast"


@dataclass(frozen=True)
class AddressType:
    """An address classified by its role; NETWORK entries carry the class."""
    kind: AddressKind
    address: Address
    network_class: Class | None = None

    def __str__(self) -> str:
        if self.kind is AddressKind.NETWORK and self.network_class is not None:
            return self.network_class.label
        return self.kind.value

    @property
    def label(self) -> str:
        return str(self)


# =============================================================================
# Network
# =============================================================================

@dataclass(frozen=True)
class Network:
    """An IPv4 network: a base address plus a subnet mask length.

    The base address is kept exactly as given and is not aligned to the
    subnet mask. Construction fails for mask lengths outside 0..32 and for
    reserved base addresses, so every instance is valid.
    """
    address: int
    subnet_mask_len: int

    def __post_init__(self):
        if not 0 <= self.subnet_mask_len <= ADDRESS_BITS:
            logger.debug("Rejected subnet mask length %d", self.subnet_mask_len)
            raise InvalidSubnetMaskError()
        if not 0 <= self.address <= ALL_ONES:
            raise InvalidAddressError()
        reserved = detect_reserved(self.address)
        if reserved is not None:
            logger.debug("Rejected reserved base address %s (%s)", Address(self.address), reserved.label)
            raise ReservedAddressError(reserved)

    @classmethod
    def try_create(cls, a: int, b: int, c: int, d: int, subnet_mask_len: int) -> "Network":
        """Build a network from four dotted-decimal octets and a mask length."""
        if subnet_mask_len > ADDRESS_BITS or subnet_mask_len < 0:
            raise InvalidSubnetMaskError()
        if any(not 0 <= octet <= 0xFF for octet in (a, b, c, d)):
            raise InvalidAddressError()
        address = a << 24 | b << 16 | c << 8 | d
        return cls(address, subnet_mask_len)

    @classmethod
    def from_cidr(cls, text: str) -> "Network":
        return parse_cidr(text)

    def __str__(self) -> str:
        num_subnets = self.num_subnets()
        if num_subnets is None:
            subnets = hosts = "N/A"
        else:
            subnets = str(num_subnets)
            hosts = str(self.num_hosts_per_subnet())
        return (
            f"{self.network_class.label}\n"
            f"Subnets:      {subnets}\n"
            f"Hosts/subnet: {hosts}"
        )

    @property
    def base(self) -> Address:
        return Address(self.address)

    @property
    def cidr(self) -> str:
        return f"{self.base}/{self.subnet_mask_len}"

    @property
    def network_class(self) -> Class:
        return classify(self.address)

    def net_mask(self) -> int | None:
        """Class-implied network mask, or None for classes D and E."""
        network_bits = self.network_class.network_bits
        if network_bits is None:
            return None
        return _top_bits(network_bits)

    def subnet_mask(self) -> int:
        if self.subnet_mask_len == 0:
            return 0
        return _top_bits(self.subnet_mask_len)

    def num_subnets(self) -> int | None:
        """Usable subnets, excluding the all-zeros and all-ones subnet patterns.

        None when the class has no network mask. Zero when no subnet mask is
        set or when the subnet mask does not reach past the network mask.
        """
        net_mask = self.net_mask()
        if net_mask is None:
            return None
        subnet_mask = self.subnet_mask()
        if subnet_mask == 0:
            return 0
        borrowed = (net_mask ^ subnet_mask) >> (ADDRESS_BITS - self.subnet_mask_len)
        return max(borrowed - 1, 0)

    def num_hosts_per_subnet(self) -> int:
        """Hosts per subnet, less the subnet broadcast address.

        With no subnet mask the whole class block counts as one subnet.
        """
        if self.subnet_mask_len > 30:
            return 0
        if self.subnet_mask_len == 0:
            mask = self.net_mask()
            if mask is None:
                mask = self.network_class.mask
            return _invert(mask) - 1
        return (ALL_ONES >> self.subnet_mask_len) - 1

    def subnets(self) -> Iterator[Address]:
        """Yield the base address of every usable subnet, in ascending order."""
        num_subnets = self.num_subnets() or 0
        shift = ADDRESS_BITS - self.subnet_mask_len
        for i in range(1, num_subnets + 1):
            yield Address((self.address | (i << shift)) & ALL_ONES)

    def addresses(self) -> Iterator[AddressType]:
        """Yield every address of the network classified by its role.

        The network address comes first and the network broadcast last.
        Classes D and E only yield the network address.
        """
        network_class = self.network_class
        yield AddressType(AddressKind.NETWORK, self.base, network_class)

        net_mask = self.net_mask()
        if net_mask is None:
            return

        subnet_mask = self.subnet_mask()
        host_mask = _invert(subnet_mask)
        # addresses strictly between the first subnet and the network broadcast
        num_addresses = _invert(net_mask) - 2 * host_mask
        logger.debug(
            "Enumerating %s: net mask %s, subnet mask %s, %d inner addresses",
            self.cidr, Address(net_mask), Address(subnet_mask), max(num_addresses - 1, 0),
        )

        for i in range(1, num_addresses):
            value = (self.address + host_mask + i) & ALL_ONES
            if value | subnet_mask == ALL_ONES:
                kind = AddressKind.SUBNET_BROADCAST
            elif _invert(value) | subnet_mask == ALL_ONES:
                kind = AddressKind.SUBNET
            else:
                kind = AddressKind.HOST
            yield AddressType(kind, Address(value))

        yield AddressType(AddressKind.NETWORK_BROADCAST, Address(self.address | _invert(net_mask)))


# =============================================================================
# Parsing
# =============================================================================

def _parse_u8(token: str) -> int:
    if not token.isascii() or not token.isdigit():
        raise InvalidAddressError()
    value = int(token)
    if value > 0xFF:
        raise InvalidAddressError()
    return value


def parse_cidr(text: str) -> Network:
    """Parse ``A.B.C.D/len`` into a Network.

    Malformed text raises InvalidAddressError; a mask length above 32 raises
    InvalidSubnetMaskError and a reserved base raises ReservedAddressError.
    """
    parts = text.strip().split("/")
    if len(parts) != 2:
        raise InvalidAddressError()
    address, mask = parts

    octets = address.split(".")
    if len(octets) != 4:
        raise InvalidAddressError()

    a, b, c, d = (_parse_u8(octet) for octet in octets)
    return Network.try_create(a, b, c, d, _parse_u8(mask))
