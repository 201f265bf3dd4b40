"""Data Transfer Objects: display-ready views of domain values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: int
    name: str
    price: str
    discount: str
    rating: str  # star glyphs, e.g. "★★★"
    stars: int
