"""CatalogueBackend implementation for Shelfman."""

from shelfman.protocols import CatalogueBackend, ProductValidation
from shelfman.service import Catalogue


class ShelfmanCatalogueBackend:
    """
    CatalogueBackend implementation over a Catalogue instance.

    Read-only view that lets other apps query stock and reorder state
    without holding a reference to the catalogue's mutating API.
    """

    def __init__(self, catalogue: Catalogue | None = None):
        self._catalogue = catalogue if catalogue is not None else Catalogue("default")

    def get_product(self, product_id: str):
        """Return product by id."""
        return self._catalogue.find_product_by_id(product_id)

    def validate_product_id(self, product_id: str) -> ProductValidation:
        """Validate product id."""
        product = self._catalogue.find_product_by_id(product_id)
        if product is None:
            return ProductValidation(
                valid=False,
                product_id=product_id,
                error_code="not_found",
                message=f"Product '{product_id}' not found",
            )

        return ProductValidation(
            valid=True,
            product_id=product_id,
            name=product.name,
            needs_reorder=product.needs_reorder,
            message="Product needs reorder" if product.needs_reorder else None,
        )

    def reorder_ids(self) -> list[str]:
        """Return ids of products that need restocking."""
        return self._catalogue.check_reorders().product_ids


# Verify implementation at import time
if not isinstance(ShelfmanCatalogueBackend(), CatalogueBackend):
    raise TypeError("ShelfmanCatalogueBackend does not implement CatalogueBackend protocol")
