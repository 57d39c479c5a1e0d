"""Shelfman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "BAD_BATCH": "Bad Batch",
    "BAD_SEARCH": "Bad search",
    "DUPLICATE_PRODUCT": "Product id already in catalogue",
    "INVALID_PRODUCT": "Invalid product",
}


class CatalogError(Exception):
    """
    Structured exception for catalogue operations.

    Usage:
        try:
            catalogue.batch_add_products(batch)
        except CatalogError as e:
            if e.code == "BAD_BATCH":
                print(f"Rejected ids: {e.product_ids}")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def product_ids(self) -> list[str]:
        """Ids the error is about: a batch's collisions or the single product."""
        if "product_ids" in self.data:
            return list(self.data["product_ids"])
        product_id = self.data.get("product_id")
        return [product_id] if product_id else []

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
