"""Rating: the closed set of star levels a product can carry."""

from __future__ import annotations

from enum import Enum

from pm.domain.exceptions import ValidationError

STAR_GLYPH = "★"


class Rating(Enum):
    NOT_RATED = 0
    ONE_STAR = 1
    TWO_STAR = 2
    THREE_STAR = 3
    FOUR_STAR = 4
    FIVE_STAR = 5

    @property
    def stars(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Display label: one glyph per star, empty for NOT_RATED."""
        return STAR_GLYPH * self.value

    @staticmethod
    def of(stars: int) -> Rating:
        """Look up the rating for a star count (0-5)."""
        if type(stars) is not int:
            raise ValidationError(f"Rating must be a whole number of stars, got {stars!r}")
        try:
            return Rating(stars)
        except ValueError as exc:
            raise ValidationError(
                f"Rating must be between 0 and 5 stars, got {stars!r}"
            ) from exc
