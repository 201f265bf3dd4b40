"""CLI commands for the Product value type."""

from __future__ import annotations

import click

from pm.domain.exceptions import DomainException
from pm.domain.model.product import Product
from pm.infrastructure.bootstrap import demo_product, show_product_handler


@click.command("shop")
def shop() -> None:
    """Print the demo product."""
    p = demo_product()
    click.echo(f"{p.id} {p.name} {p.price} {p.discount}")


@click.command("show")
@click.option("--id", "product_id", type=int, default=0, show_default=True, help="Product ID.")
@click.option("--name", default="no name", show_default=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@click.option("--stars", type=int, default=0, show_default=True, help="Initial rating (0-5).")
@click.option("--rate", "rate", type=int, default=None, help="Re-rate the product (0-5).")
def product_show(product_id: int, name: str, price: str, stars: int, rate: int | None) -> None:
    """Show a product with its discount and rating."""
    handler = show_product_handler()

    try:
        dto = handler.handle(
            product_id=product_id, name=name, price=price, stars=stars, rating_stars=rate
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.id} {dto.name} {dto.price} {dto.discount} {dto.rating}")


@click.command("discount")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
def product_discount(price: str) -> None:
    """Print the discount for a price."""
    try:
        default = Product()
        product = Product.of(default.id, default.name, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(str(product.discount))
