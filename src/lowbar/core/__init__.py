"""Configuration and shared types."""

from lowbar.core.config import Settings, settings
from lowbar.core.types import Collection, Iteratee, Predicate, Seconds

__all__ = [
    "Settings",
    "settings",
    "Collection",
    "Iteratee",
    "Predicate",
    "Seconds",
]
