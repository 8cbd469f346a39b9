"""
Command line entry point for CIDR Manager.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import click

from cidrmanager import __version__
from cidrmanager.config import get_config
from cidrmanager.ipv4.cli import ip
from cidrmanager.logging_config import configure_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="cidrmanager")
def main(debug: bool):
    """CIDR Manager - IPv4 CIDR block utilities."""
    config = get_config()
    try:
        configure_logging(
            debug=debug,
            log_to_file=bool(config.log_file),
            log_file=config.log_file or None,
            level=config.log_level,
        )
    except ValueError as e:
        raise click.UsageError(f"CIDRMANAGER_LOG_LEVEL: {e}")


main.add_command(ip)


if __name__ == "__main__":
    main()
