"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import SORT_FIELDS, ProductQuery
from ims.application.export_products import ExportProductsHandler
from ims.application.list_products import ListProductsHandler, distinct_categories
from ims.application.show_product import ShowProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import DomainException
from ims.domain.model.product import CATEGORIES, Product, ProductStatus, StockStatus
from ims.domain.model.product_form import ProductChanges, ProductFormData
from ims.infrastructure.bootstrap import product_repository

_STATUSES = [s.value for s in ProductStatus]
_STOCK_FILTERS = [s.value for s in StockStatus]


def query_options(command):
    """Filter and sort options shared by ``list`` and ``export``."""
    options = [
        click.option("--search", help="Match name, SKU or category (case-insensitive)."),
        click.option("--category", type=click.Choice(CATEGORIES), help="Only this category."),
        click.option("--stock", type=click.Choice(_STOCK_FILTERS), help="Only this stock level."),
        click.option("--sort", "sort_by", type=click.Choice(SORT_FIELDS), default="name",
                     show_default=True, help="Sort field."),
        click.option("--desc", "descending", is_flag=True, help="Sort descending."),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _build_query(search, category, stock, sort_by, descending) -> ProductQuery:
    return ProductQuery(
        search=search,
        category=category,
        stock=StockStatus(stock) if stock else None,
        sort_by=sort_by,
        descending=descending,
    )


@click.command("add")
@click.option("--sku", required=True, help="Stock keeping unit, e.g. LAPTOP-001.")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, type=click.Choice(CATEGORIES), help="Category.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--min-stock", required=True, type=int, help="Low-stock threshold.")
@click.option("--status", type=click.Choice(_STATUSES), default="active", show_default=True)
@click.option("--description", help="Free-text description.")
@click.option("--supplier", help="Supplier name.")
@click.option("--image-url", help="http(s) link to a jpg, jpeg, png, gif or webp image.")
def product_add(sku, name, category, price, quantity, min_stock, status,
                description, supplier, image_url) -> None:
    """Add a new product to the catalog."""
    try:
        handler = AddProductHandler(product_repo=product_repository())
        form = ProductFormData(
            sku=sku,
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            min_stock=min_stock,
            status=status,
            description=description,
            supplier=supplier,
            image_url=image_url,
        )
        product = handler.handle(form)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' ({product.sku}) added at {product.price}")


@click.command("list")
@query_options
def product_list(search, category, stock, sort_by, descending) -> None:
    """List products in the catalog."""
    try:
        handler = ListProductsHandler(product_repo=product_repository())
        listing = handler.handle(_build_query(search, category, stock, sort_by, descending))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not listing.products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<32} {'SKU':<14} {'Name':<24} {'Category':<16} "
        f"{'Price':>12} {'Qty':>6} {'Min':>5} {'Stock':<12}"
    )
    click.echo("-" * 128)
    for p in listing.products:
        click.echo(
            f"{p.id:<32} {p.sku:<14} {p.name[:24]:<24} {p.category:<16} "
            f"{str(p.price):>12} {p.quantity:>6} {p.min_stock:>5} {p.stock_status.label:<12}"
        )
    click.echo(f"\nShowing {listing.shown} of {listing.total} products")
    click.echo(f"Categories: {', '.join(distinct_categories(listing.products))}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show every field of one product."""
    try:
        handler = ShowProductHandler(product_repo=product_repository())
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _echo_product(product)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--sku", help="New SKU.")
@click.option("--name", help="New name.")
@click.option("--category", type=click.Choice(CATEGORIES), help="New category.")
@click.option("--price", help="New price (e.g. 29.99).")
@click.option("--quantity", type=int, help="New stock level.")
@click.option("--min-stock", type=int, help="New low-stock threshold.")
@click.option("--status", type=click.Choice(_STATUSES), help="New status.")
@click.option("--description", help="New description ('' clears it).")
@click.option("--supplier", help="New supplier ('' clears it).")
@click.option("--image-url", help="New image URL ('' clears it).")
def product_update(product_id, sku, name, category, price, quantity, min_stock,
                   status, description, supplier, image_url) -> None:
    """Update some fields of a product."""
    try:
        handler = UpdateProductHandler(product_repo=product_repository())
        changes = ProductChanges(
            sku=sku,
            name=name,
            category=category,
            price=price,
            quantity=quantity,
            min_stock=min_stock,
            status=status,
            description=description,
            supplier=supplier,
            image_url=image_url,
        )
        product = handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} updated")
    _echo_product(product)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Delete this product permanently?")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        handler = DeleteProductHandler(product_repo=product_repository())
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted")


@click.command("export")
@click.option("--output", "-o", type=click.File("w", encoding="utf-8"), default="-",
              show_default=True, help="CSV file to write.")
@query_options
def product_export(output, search, category, stock, sort_by, descending) -> None:
    """Export the (filtered) product list as CSV."""
    try:
        handler = ExportProductsHandler(product_repo=product_repository())
        rows = handler.handle(output, _build_query(search, category, stock, sort_by, descending))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if output.name != "<stdout>":
        click.echo(f"Exported {rows} products to {output.name}", err=True)


def _utc(timestamp: datetime) -> str:
    return timestamp.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")


def _echo_product(product: Product) -> None:
    rows = [
        ("ID", product.id),
        ("SKU", product.sku),
        ("Name", product.name),
        ("Description", product.description or "-"),
        ("Category", product.category),
        ("Price", str(product.price)),
        ("Quantity", product.quantity),
        ("Min stock", product.min_stock),
        ("Stock", product.stock_status.label),
        ("Value", str(product.inventory_value)),
        ("Supplier", product.supplier or "-"),
        ("Image", product.image_url or "-"),
        ("Status", product.status.value),
        ("Created", _utc(product.created_at)),
        ("Updated", _utc(product.updated_at)),
    ]
    for label, value in rows:
        click.echo(f"{label + ':':<13} {value}")
