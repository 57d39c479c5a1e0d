"""
Shelfman public API.

CORE (essential):
    Catalogue.add_product(product)          - Add product
    Catalogue.find_product_by_id(id)        - Get product
    Catalogue.remove_product_by_id(id)      - Remove product
    Catalogue.check_reorders()              - Products needing restock

BATCH / SEARCH:
    Catalogue.batch_add_products(batch)     - Validate and insert a batch
    Catalogue.search(criteria)              - Search by keyword or price
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING

from shelfman.conf import shelfman_settings
from shelfman.exceptions import CatalogError
from shelfman.protocols import (
    BATCH_TYPE,
    Batch,
    KeywordCriteria,
    PriceCriteria,
    ReorderReport,
    SearchCriteria,
    parse_criteria,
)

if TYPE_CHECKING:
    from shelfman.models import Product

logger = logging.getLogger(__name__)


class Catalogue:
    """
    Named, in-memory collection of products keyed by id.

    All mutation goes through the methods below; lookups that miss
    return None rather than raising.

    Not thread-safe. Callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(self, name: str):
        self.name = name
        self._products: dict[str, "Product"] = {}

    def __repr__(self):
        return f"<Catalogue {self.name!r} ({len(self._products)} products)>"

    def __len__(self):
        return len(self._products)

    def __contains__(self, product_id):
        return product_id in self._products

    def __iter__(self) -> Iterator["Product"]:
        return iter(list(self._products.values()))

    @property
    def products(self) -> list["Product"]:
        """Snapshot of the products, in insertion order."""
        return list(self._products.values())

    # ======================================================================
    # CORE API
    # ======================================================================

    def add_product(self, product: "Product") -> None:
        """
        Add a single product.

        Raises:
            CatalogError: DUPLICATE_PRODUCT if the id is taken and
                SHELFMAN["REJECT_DUPLICATES"] is on (default). With it off,
                the new product replaces the old one.
        """
        if product.id in self._products and shelfman_settings.REJECT_DUPLICATES:
            error = CatalogError("DUPLICATE_PRODUCT", product_id=product.id, catalogue=self.name)
            logger.warning("Rejected %s for catalogue %r: id taken", error.product_ids, self.name)
            raise error

        self._products[product.id] = product
        logger.debug("Added %s to catalogue %r", product.id, self.name)
        from shelfman.signals import product_added

        product_added.send(
            sender=self.__class__,
            catalogue=self,
            product=product,
            product_id=product.id,
        )

    def find_product_by_id(self, product_id: str) -> "Product | None":
        """Return the product with this id, or None."""
        return self._products.get(product_id)

    def get_many(self, product_ids: Iterable[str]) -> dict[str, "Product"]:
        """Return {id: Product} for the ids present; missing ids are omitted."""
        return {pid: self._products[pid] for pid in product_ids if pid in self._products}

    def remove_product_by_id(self, product_id: str) -> "Product | None":
        """Remove and return the product with this id, or None if absent."""
        product = self._products.pop(product_id, None)
        if product is None:
            return None

        logger.debug("Removed %s from catalogue %r", product_id, self.name)
        from shelfman.signals import product_removed

        product_removed.send(
            sender=self.__class__,
            catalogue=self,
            product=product,
            product_id=product_id,
        )
        return product

    def check_reorders(self) -> ReorderReport:
        """Report ids of products whose stock is at or below reorder level."""
        return ReorderReport(
            product_ids=[p.id for p in self._products.values() if p.needs_reorder]
        )

    # ======================================================================
    # BATCH API
    # ======================================================================

    def batch_add_products(self, batch: "Batch | Mapping") -> int:
        """
        Add a batch of products.

        Validation runs over the whole batch before anything is inserted,
        so a rejected batch leaves the catalogue untouched. Candidates with
        no stock pass validation but are not inserted.

        Args:
            batch: Batch, or {"type": "Batch", "products": [...]}

        Returns:
            Number of products inserted

        Raises:
            CatalogError: BAD_BATCH on wrong batch type, non-product
                candidates, or ids already in the catalogue or repeated
                within the batch
        """
        batch = self._validate_batch(batch)

        added, skipped = [], []
        for product in batch.products:
            if product.in_stock:
                self._products[product.id] = product
                added.append(product.id)
            else:
                skipped.append(product.id)

        logger.info(
            "Batch into catalogue %r: %d added, %d skipped (no stock)",
            self.name,
            len(added),
            len(skipped),
        )
        from shelfman.signals import batch_added

        batch_added.send(
            sender=self.__class__,
            catalogue=self,
            added=added,
            skipped=skipped,
        )
        return len(added)

    def _validate_batch(self, batch: "Batch | Mapping") -> Batch:
        """Internal: check a batch without touching the catalogue."""
        from shelfman.models import Product

        if isinstance(batch, Mapping):
            try:
                batch = Batch.from_mapping(batch)
            except CatalogError as e:
                self._log_rejected_batch(e)
                raise
        if not isinstance(batch, Batch) or batch.type != BATCH_TYPE:
            self._reject_batch(reason="type")

        if not all(isinstance(p, Product) for p in batch.products):
            self._reject_batch(reason="candidate")

        seen: set[str] = set()
        collisions: list[str] = []
        for product in batch.products:
            if product.id in self._products or product.id in seen:
                collisions.append(product.id)
            seen.add(product.id)

        if collisions:
            self._reject_batch(reason="duplicate", product_ids=collisions)
        return batch

    def _reject_batch(self, **data) -> None:
        error = CatalogError("BAD_BATCH", catalogue=self.name, **data)
        self._log_rejected_batch(error)
        raise error

    def _log_rejected_batch(self, error: CatalogError) -> None:
        logger.warning("Rejected batch for catalogue %r: %s", self.name, error.as_dict())

    # ======================================================================
    # SEARCH API
    # ======================================================================

    def search(self, criteria: "Mapping | SearchCriteria") -> list["Product"]:
        """
        Search products.

        Args:
            criteria: {"keyword": str} for a substring match on name, or
                {"price": number} for unit_price <= price. KeywordCriteria
                and PriceCriteria are accepted as well.

        Returns:
            List of Product (empty if nothing matches)

        Raises:
            CatalogError: BAD_SEARCH unless exactly one known option is given
        """
        try:
            criteria = parse_criteria(criteria)
        except CatalogError:
            logger.warning("Bad search criteria for catalogue %r: %r", self.name, criteria)
            raise

        if isinstance(criteria, KeywordCriteria):
            return self._search_keyword(criteria.keyword)
        if isinstance(criteria, PriceCriteria):
            return [p for p in self._products.values() if p.unit_price <= criteria.price]
        raise CatalogError("BAD_SEARCH", criteria=repr(criteria))

    def _search_keyword(self, keyword: str) -> list["Product"]:
        if shelfman_settings.SEARCH_CASE_SENSITIVE:
            return [p for p in self._products.values() if keyword in p.name]
        keyword = keyword.casefold()
        return [p for p in self._products.values() if keyword in p.name.casefold()]

