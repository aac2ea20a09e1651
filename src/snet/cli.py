"""
snet4 command line.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click
from rich.console import Console

from snet import __version__
from snet.config import get_config
from snet.errors import SnetError
from snet.ip.core import parse_cidr
from snet.ip.render import (
    AddressFormat,
    render_addresses,
    render_subnets,
    render_summary,
    summary_table,
)
from snet.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("network")
@click.option("-s", "--list-snets", is_flag=True, help="List all base subnet network addresses")
@click.option(
    "-a", "--list-all", is_flag=True,
    help="List the network address, network broadcast address, subnet addresses, "
         "subnet broadcast addresses and host addresses within each subnet.",
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice([f.value for f in AddressFormat]),
    default=None,
    help="How listed addresses are written (default: dotted)",
)
@click.option("-n", "--limit", type=click.IntRange(min=1), default=None,
              help="Stop a listing after this many entries")
@click.option("--details", is_flag=True, help="Show masks and counts as a table")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Also log to this file")
@click.version_option(__version__, prog_name="snet4")
def main(
    network: str,
    list_snets: bool,
    list_all: bool,
    fmt: str | None,
    limit: int | None,
    details: bool,
    debug: bool,
    log_file: str | None,
):
    """Subnet information about an IPv4 network.

    NETWORK is an address in CIDR notation (e.g. 192.168.13.160/28).

    Subnets which cross an octet boundary are hard to read in dotted decimal
    notation. Without options, snet4 prints the class of the network, the
    number of subnets and the hosts per subnet; it can also list every
    subnet, host and broadcast address.

    Examples:
        snet4 192.168.147.0/28
        snet4 -s 172.16.0.0/20
        snet4 -a -f both 192.168.147.0/28
    """
    if list_snets and list_all:
        raise click.UsageError("--list-snets and --list-all cannot be used together")

    config = get_config()
    configure_logging(debug=debug, log_file=log_file, level=config.log_level)

    address_format = AddressFormat(fmt) if fmt else config.address_format
    if limit is None:
        limit = config.limit

    console = Console(highlight=False, emoji=False)

    try:
        net = parse_cidr(network)
    except SnetError as e:
        logger.debug("Could not build network from %r: %s", network, e)
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    logger.debug("Parsed %s as %s", network, net.cidr)

    if list_snets:
        for line in render_subnets(net, address_format, limit):
            console.print(line, markup=False, soft_wrap=True)
    elif list_all:
        for line in render_addresses(net, address_format, limit):
            console.print(line, markup=False, soft_wrap=True)
    elif details:
        console.print(summary_table(net))
    else:
        console.print(render_summary(net), markup=False)


if __name__ == "__main__":
    main()
