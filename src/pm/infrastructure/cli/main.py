import logging

import click

from pm.infrastructure.cli.product_commands import product_discount, product_show, shop


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """PM: Product Management"""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


@cli.group()
def product() -> None:
    """Inspect products."""


# Register subcommands
cli.add_command(shop)
product.add_command(product_discount)
product.add_command(product_show)
