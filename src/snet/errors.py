"""
Errors raised while building a network.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snet.ip.core import ReservedAddress


class SnetError(ValueError):
    """Base class for every error surfaced by snet."""

    message = "Invalid network"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidSubnetMaskError(SnetError):
    """Subnet mask length outside 0..32."""

    message = "Subnet mask was invalid"


class InvalidAddressError(SnetError):
    """Malformed CIDR text or an octet outside 0..255."""

    message = "Network address was invalid"


class ReservedAddressError(SnetError):
    """The base address lies in a reserved block."""

    def __init__(self, kind: ReservedAddress):
        self.kind = kind
        super().__init__(f"Reserved address cannot be used as a network: {kind.label}")
