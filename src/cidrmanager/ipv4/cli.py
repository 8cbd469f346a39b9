"""
IPv4 CIDR CLI commands.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click
from rich.console import Console
from rich.table import Table

from cidrmanager.config import get_config
from cidrmanager.ipv4.core import IPv4CIDR, parse_cidr
from cidrmanager.ipv4.exceptions import CIDRError
from cidrmanager.logging_config import get_logger

logger = get_logger(__name__)

standardize_option = click.option(
    "--standardize/--strict",
    default=None,
    help="Convert the address to the first IP in range instead of rejecting it",
)


def _parse(console: Console, cidr: str, standardize: bool | None) -> IPv4CIDR:
    if standardize is None:
        standardize = get_config().standardize
    logger.debug("Parsing %s (standardize=%s)", cidr, standardize)
    try:
        return parse_cidr(cidr, standardize=standardize)
    except CIDRError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)


def _block_table(title: str, block: IPv4CIDR) -> Table:
    table = Table(title=title, show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("CIDR", str(block))
    table.add_row("Address", block.address)
    table.add_row("Netmask", block.netmask)
    table.add_row("Prefix Length", f"/{block.prefix_length}")
    table.add_row("Range Size", f"{block.range_size:,}")
    table.add_row("Last Address", block.last_address)
    return table


@click.group()
def ip():
    """IPv4 CIDR utilities."""
    pass


@ip.command()
@click.argument("cidr")
@standardize_option
def info(cidr: str, standardize: bool | None):
    """Show address, netmask and range size of a CIDR block.

    Examples:
        cidrmanager ip info 10.10.0.0/26
        cidrmanager ip info 10.10.0.1/26 --standardize
        cidrmanager ip info 192.168.1.1
    """
    console = Console()
    block = _parse(console, cidr, standardize)
    console.print(_block_table(f"CIDR Block: {cidr}", block))


@ip.command()
@click.argument("cidr")
@standardize_option
def split(cidr: str, standardize: bool | None):
    """Split a CIDR block into two halves.

    Examples:
        cidrmanager ip split 10.10.0.0/26
    """
    console = Console()
    block = _parse(console, cidr, standardize)

    try:
        lower, upper = block.split()
    except CIDRError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    logger.debug("Split %s into %s and %s", block, lower, upper)
    console.print(f"[cyan]Splitting {block}:[/cyan]\n")
    console.print(_block_table("Lower", lower))
    console.print(_block_table("Upper", upper))


@ip.command()
@click.argument("cidr")
@click.argument("n", type=int)
@click.option("--with-prefix", is_flag=True, help="Append the prefix length to the address")
@standardize_option
def nth(cidr: str, n: int, with_prefix: bool, standardize: bool | None):
    """Show the Nth address of a CIDR block (1 is the first address).

    Examples:
        cidrmanager ip nth 10.10.0.0/26 10
        cidrmanager ip nth 10.10.0.0/26 10 --with-prefix
    """
    console = Console()
    block = _parse(console, cidr, standardize)

    try:
        address = block.nth_address(n, with_prefix=with_prefix)
    except CIDRError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(address)


@ip.command()
@click.argument("cidr")
@click.argument("target")
@standardize_option
def contains(cidr: str, target: str, standardize: bool | None):
    """Check if a CIDR block contains an address or block.

    Examples:
        cidrmanager ip contains 10.0.0.0/8 10.1.2.3
        cidrmanager ip contains 192.168.0.0/16 192.168.1.0/24
    """
    console = Console()
    block = _parse(console, cidr, standardize)

    try:
        result = block.contains(target)
    except CIDRError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if result:
        console.print(f"[green]Yes[/green] - {target} is within {block}")
    else:
        console.print(f"[red]No[/red] - {target} is not within {block}")
