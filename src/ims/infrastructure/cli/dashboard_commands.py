"""CLI commands for dashboard statistics and analytics."""

from __future__ import annotations

import threading

import click

from ims.application.show_dashboard import AnalyticsHandler, DashboardStatsHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.dashboard import DashboardStats
from ims.infrastructure.bootstrap import change_notifier, product_repository


def _echo_stats(stats: DashboardStats) -> None:
    click.echo(f"Total products:  {stats.total_products}")
    click.echo(f"Total value:     {stats.total_value}")
    click.echo(f"Low stock:       {stats.low_stock_items}")
    click.echo(f"Out of stock:    {stats.out_of_stock_items}")
    if stats.needs_attention:
        click.echo("Stock alerts:    requires attention")
    else:
        click.echo("Stock alerts:    all good")


@click.command("stats")
def dashboard_stats() -> None:
    """Show the summary figures for the whole catalog."""
    try:
        handler = DashboardStatsHandler(product_repo=product_repository())
        stats = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_stats(stats)


@click.command("analytics")
@click.option("--top", default=10, show_default=True, type=click.IntRange(min=1),
              help="How many products to rank by value.")
def dashboard_analytics(top: int) -> None:
    """Break inventory value down by category and stock level."""
    try:
        handler = AnalyticsHandler(product_repo=product_repository(), top_limit=top)
        report = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_stats(report.stats)
    click.echo(f"Average value:   {report.average_value}")

    click.echo(f"\n{'Category':<20} {'Products':>8} {'Value':>16}")
    click.echo("-" * 46)
    for row in report.categories:
        click.echo(f"{row.name:<20} {row.products:>8} {str(row.value):>16}")

    click.echo(f"\n{'Stock level':<20} {'Products':>8}")
    click.echo("-" * 29)
    for status, count in report.stock.items():
        click.echo(f"{status.label:<20} {count:>8}")

    click.echo(f"\n{'Top products':<24} {'Qty':>6} {'Value':>16}")
    click.echo("-" * 48)
    for item in report.top_products:
        name = item.name if len(item.name) <= 20 else item.name[:20] + "..."
        click.echo(f"{name:<24} {item.quantity:>6} {str(item.value):>16}")


@click.command("watch")
@click.option("--duration", type=float, default=None,
              help="Stop after this many seconds (default: until Ctrl-C).")
def dashboard_watch(duration: float | None) -> None:
    """Re-print the stats whenever the catalog may have changed."""
    try:
        handler = DashboardStatsHandler(product_repo=product_repository())
        _echo_stats(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    def refresh() -> None:
        try:
            stats = handler.handle()
        except DomainException as exc:
            click.echo(f"Refresh failed: {exc}", err=True)
            return
        click.echo("\nCatalog may have changed, refreshed stats:")
        _echo_stats(stats)

    subscription = change_notifier().subscribe(refresh)
    try:
        threading.Event().wait(duration)
    except KeyboardInterrupt:
        click.echo("\nStopped watching.")
    finally:
        subscription.cancel()
