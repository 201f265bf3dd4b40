"""Product value type.

A product is never mutated after construction. Re-rating a product
produces a new instance, so differently rated versions of the same
product can never alias each other.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from pm.domain.exceptions import ValidationError
from pm.domain.model.rating import Rating

# Discount rate is 10%
DISCOUNT_RATE = Decimal("0.1")

_CENTS = Decimal("0.01")


@dataclass(frozen=True, eq=False)
class Product:
    """A product with an id, a name, a price and a rating.

    No argument is validated: negative ids, empty names and negative
    prices are all accepted as given.

    Identity is ``id`` + ``name``; ``price`` and ``rating`` take no part
    in equality, and the hash is derived from ``id`` alone. Two products
    that differ only in price are therefore equal. Kept for compatibility
    with existing callers even though full-field equality would be the
    less surprising choice.
    """

    id: int = 0
    name: str = "no name"
    price: Decimal = Decimal("0")
    rating: Rating = Rating.NOT_RATED

    @property
    def discount(self) -> Decimal:
        """``price`` times DISCOUNT_RATE, rounded half-up to 2 places."""
        price = Decimal(self.price)
        # Enough digits for the exact product and its cents, whatever the magnitude.
        digits = max(len(price.as_tuple().digits) + 1, price.adjusted() + 3) + 2
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, digits)
            return (price * DISCOUNT_RATE).quantize(_CENTS, rounding=ROUND_HALF_UP)

    def apply_rating(self, new_rating: Rating) -> Product:
        return replace(self, rating=new_rating)

    # --- Identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Product):
            return NotImplemented
        return self.id == other.id and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.id)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.id} {self.name} {self.price} {self.discount} {self.rating.label}"

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(
        id: int,
        name: str,
        price: str | float | int | Decimal,
        rating: Rating = Rating.NOT_RATED,
    ) -> Product:
        """Convenient factory that coerces the price to Decimal safely."""
        try:
            amount = Decimal(str(price))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid price: {price!r}") from exc
        if not amount.is_finite():
            raise ValidationError(f"Invalid price: {price!r}")
        return Product(id, name, amount, rating)
