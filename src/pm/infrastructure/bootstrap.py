"""Composition root: wires the use cases and holds the demo defaults.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from pm.application.show_product import ShowProductHandler
from pm.domain.model.product import Product

# Price given to the default product by the ``shop`` demo.
DEMO_PRICE = Decimal("1.99")


def show_product_handler() -> ShowProductHandler:
    return ShowProductHandler()


def demo_product() -> Product:
    return replace(Product(), price=DEMO_PRICE)
