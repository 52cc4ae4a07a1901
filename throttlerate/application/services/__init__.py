"""Application services."""

from .rate_catalog import RateCatalog

__all__ = [
    "RateCatalog",
]
