"""Catalogue protocols."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

from shelfman.exceptions import CatalogError

if TYPE_CHECKING:
    from shelfman.models import Product


BATCH_TYPE = "Batch"


@dataclass(frozen=True)
class ReorderReport:
    """Ids of products at or below their reorder level.

    Recomputed on each call; order is not significant.
    """

    product_ids: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Batch:
    """Candidate products to be inserted as a unit."""

    products: tuple["Product", ...] = ()
    type: str = BATCH_TYPE

    def __post_init__(self):
        try:
            products = tuple(self.products or ())
        except TypeError:
            raise CatalogError("BAD_BATCH", reason="candidate", products=repr(self.products)) from None
        object.__setattr__(self, "products", products)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Batch":
        """Build from the plain form {"type": "Batch", "products": [...]}."""
        return cls(
            products=data.get("products"),
            type=data.get("type", ""),
        )


@dataclass(frozen=True)
class KeywordCriteria:
    """Match products whose name contains keyword."""

    keyword: str


@dataclass(frozen=True)
class PriceCriteria:
    """Match products whose unit price is at most price."""

    price: Decimal


SearchCriteria = Union[KeywordCriteria, PriceCriteria]


def parse_criteria(criteria: "Mapping | SearchCriteria") -> SearchCriteria:
    """
    Convert a criteria mapping into a SearchCriteria.

    Exactly one of "keyword" or "price" must be present.

    Raises:
        CatalogError: BAD_SEARCH for anything else
    """
    if isinstance(criteria, (KeywordCriteria, PriceCriteria)):
        return criteria
    if not isinstance(criteria, Mapping):
        raise CatalogError("BAD_SEARCH", criteria=repr(criteria))

    options = set(criteria)
    if len(options) != 1:
        raise CatalogError("BAD_SEARCH", options=sorted(map(str, options)))

    (option,) = options
    value = criteria[option]

    if option == "keyword":
        if not isinstance(value, str):
            raise CatalogError("BAD_SEARCH", option=option, value=repr(value))
        return KeywordCriteria(keyword=value)

    if option == "price":
        if isinstance(value, bool) or value is None:
            raise CatalogError("BAD_SEARCH", option=option, value=repr(value))
        try:
            limit = value if isinstance(value, Decimal) else Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise CatalogError("BAD_SEARCH", option=option, value=repr(value)) from None
        if limit.is_nan():
            raise CatalogError("BAD_SEARCH", option=option, value=repr(value))
        return PriceCriteria(price=limit)

    raise CatalogError("BAD_SEARCH", options=[str(option)])


@dataclass(frozen=True)
class ProductValidation:
    """Validation result for a product id."""

    valid: bool
    product_id: str
    name: str | None = None
    needs_reorder: bool = False
    error_code: str | None = None
    message: str | None = None


@runtime_checkable
class CatalogueBackend(Protocol):
    """Interface for catalogue queries."""

    def get_product(self, product_id: str) -> "Product | None":
        """Return product by id."""
        ...

    def validate_product_id(self, product_id: str) -> ProductValidation:
        """Validate product id."""
        ...

    def reorder_ids(self) -> list[str]:
        """Return ids of products that need restocking."""
        ...
