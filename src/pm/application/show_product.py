"""Application service: Show Product use case (query)."""

from __future__ import annotations

import logging
from decimal import Decimal

from pm.application.dto import ProductDTO
from pm.domain.model.product import Product
from pm.domain.model.rating import Rating

logger = logging.getLogger(__name__)


class ShowProductHandler:

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | Decimal,
        stars: int = 0,
        rating_stars: int | None = None,
    ) -> ProductDTO:
        """Build a product from raw input and describe it.

        When ``rating_stars`` is given the product is re-rated through
        ``apply_rating``, which leaves the originally built one untouched.
        """
        product = Product.of(product_id, name, price, Rating.of(stars))
        if rating_stars is not None:
            rated = product.apply_rating(Rating.of(rating_stars))
            logger.debug("Re-rated product %s from %s to %s", product.id,
                         product.rating.name, rated.rating.name)
            product = rated

        logger.debug("Product %s: price=%s discount=%s", product.id,
                     product.price, product.discount)
        return self._to_dto(product)

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=str(product.price),
            discount=str(product.discount),
            rating=product.rating.label,
            stars=product.rating.stars,
        )
