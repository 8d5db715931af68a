import logging

import click

from ims.infrastructure.cli.dashboard_commands import (
    dashboard_analytics,
    dashboard_stats,
    dashboard_watch,
)
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_export,
    product_list,
    product_show,
    product_update,
)
from ims.infrastructure.config import load_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """IMS — Inventory Management System"""
    level = "DEBUG" if verbose else load_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def dashboard() -> None:
    """Inventory statistics and analytics."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_export)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
dashboard.add_command(dashboard_analytics)
dashboard.add_command(dashboard_stats)
dashboard.add_command(dashboard_watch)
