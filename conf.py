"""
Shelfman configuration.

Usage in settings.py:
    SHELFMAN = {
        "SEARCH_CASE_SENSITIVE": True,
        "REJECT_DUPLICATES": True,  # False = add_product replaces existing id
        "DEFAULT_UNIT_PRICE": "10.00",  # price for products built without one
    }
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from django.conf import settings


@dataclass
class ShelfmanSettings:
    """Shelfman configuration settings."""

    SEARCH_CASE_SENSITIVE: bool = True
    REJECT_DUPLICATES: bool = True
    DEFAULT_UNIT_PRICE: Decimal = Decimal("10.00")

    def __post_init__(self):
        if not isinstance(self.DEFAULT_UNIT_PRICE, Decimal):
            self.DEFAULT_UNIT_PRICE = Decimal(str(self.DEFAULT_UNIT_PRICE))


def get_shelfman_settings() -> ShelfmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "SHELFMAN", {})
    return ShelfmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_shelfman_settings(), name)


shelfman_settings = _LazySettings()
