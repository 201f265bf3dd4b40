"""Domain-level exceptions.

The domain model itself accepts any value of the right type. These are
raised only by the factories that turn raw input (strings from the CLI)
into domain values, so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Raw input could not be turned into a domain value."""
