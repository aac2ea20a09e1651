"""
Text rendering for networks and address listings.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from enum import Enum
from itertools import islice
from typing import Iterable, Iterator

from rich.table import Table

from snet.ip.core import ALL_ONES, Address, Network


class AddressFormat(str, Enum):
    """How listed addresses are written."""
    DOTTED = "dotted"
    BINARY = "binary"
    BOTH = "both"


# column width of a rendered address, used to align role labels
FORMAT_WIDTHS = {
    AddressFormat.DOTTED: 15,
    AddressFormat.BINARY: 32,
    AddressFormat.BOTH: 50,
}


def render_address(address: Address, fmt: AddressFormat = AddressFormat.DOTTED) -> str:
    """Render one address as dotted decimal, binary, or both."""
    fmt = AddressFormat(fmt)
    if fmt is AddressFormat.BINARY:
        return address.binary
    if fmt is AddressFormat.BOTH:
        return address.debug
    return str(address)


def _take(items: Iterable, limit: int | None) -> Iterable:
    if limit is None:
        return items
    return islice(items, limit)


def render_subnets(
    network: Network,
    fmt: AddressFormat = AddressFormat.DOTTED,
    limit: int | None = None,
) -> Iterator[str]:
    """Yield one line per subnet base address."""
    for address in _take(network.subnets(), limit):
        yield render_address(address, fmt)


def render_addresses(
    network: Network,
    fmt: AddressFormat = AddressFormat.DOTTED,
    limit: int | None = None,
) -> Iterator[str]:
    """Yield one line per address, suffixed with its role label."""
    width = FORMAT_WIDTHS[AddressFormat(fmt)]
    for entry in _take(network.addresses(), limit):
        yield f"{render_address(entry.address, fmt):<{width}}  {entry.label}"


def render_summary(network: Network) -> str:
    """Class, subnet count and hosts per subnet as three lines."""
    return str(network)


def summary_table(network: Network) -> Table:
    """Detailed summary of a network as a rich table."""
    table = Table(title=f"Subnet Calculator: {network.cidr}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Network", str(network.base))
    table.add_row("Class", network.network_class.label)

    net_mask = network.net_mask()
    if net_mask is None:
        table.add_row("Net Mask", "N/A")
    else:
        table.add_row("Net Mask", Address(net_mask).debug)
    table.add_row("Subnet Mask", f"{Address(network.subnet_mask()).debug} (/{network.subnet_mask_len})")

    num_subnets = network.num_subnets()
    if num_subnets is None:
        table.add_row("Subnets", "N/A")
    else:
        table.add_row("Subnets", f"{num_subnets:,}")
        table.add_row("Hosts/Subnet", f"{network.num_hosts_per_subnet():,}")

    if net_mask is not None:
        broadcast = Address(network.address | (~net_mask & ALL_ONES))
        table.add_row("Network Broadcast", str(broadcast))

    return table
