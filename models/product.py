"""Product model."""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shelfman.conf import shelfman_settings
from shelfman.exceptions import CatalogError


def _to_decimal(value) -> Decimal:
    """Normalize a price to Decimal (floats go through str to avoid binary noise)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Product:
    """
    Stocked product.

    Immutable once constructed: the catalogue stores and returns products
    but never changes their fields.

    unit_price accepts Decimal, int, float or numeric str and is stored
    as Decimal. When omitted it takes SHELFMAN["DEFAULT_UNIT_PRICE"]
    (10.00 unless configured).
    """

    id: str
    name: str
    quantity_in_stock: int
    reorder_level: int
    unit_price: Decimal | None = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise CatalogError("INVALID_PRODUCT", field="id", value=self.id)

        for name in ("quantity_in_stock", "reorder_level"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise CatalogError("INVALID_PRODUCT", product_id=self.id, field=name, value=value)
            if not math.isfinite(value) or value < 0 or value != int(value):
                raise CatalogError("INVALID_PRODUCT", product_id=self.id, field=name, value=value)
            object.__setattr__(self, name, int(value))

        if self.unit_price is None:
            object.__setattr__(self, "unit_price", shelfman_settings.DEFAULT_UNIT_PRICE)

        try:
            price = _to_decimal(self.unit_price)
        except (InvalidOperation, ValueError, TypeError):
            raise CatalogError(
                "INVALID_PRODUCT", product_id=self.id, field="unit_price", value=self.unit_price
            ) from None
        if not price.is_finite() or price < 0:
            raise CatalogError("INVALID_PRODUCT", product_id=self.id, field="unit_price", value=self.unit_price)
        object.__setattr__(self, "unit_price", price)

    def __str__(self):
        return f"{self.id} - {self.name}"

    @property
    def needs_reorder(self) -> bool:
        """True if stock is at or below the reorder level."""
        return self.quantity_in_stock <= self.reorder_level

    @property
    def in_stock(self) -> bool:
        return self.quantity_in_stock > 0
