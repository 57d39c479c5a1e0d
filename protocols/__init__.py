"""Shelfman protocols."""

from shelfman.protocols.catalog import (
    BATCH_TYPE,
    Batch,
    CatalogueBackend,
    KeywordCriteria,
    PriceCriteria,
    ProductValidation,
    ReorderReport,
    SearchCriteria,
    parse_criteria,
)

__all__ = [
    "BATCH_TYPE",
    "Batch",
    "CatalogueBackend",
    "KeywordCriteria",
    "PriceCriteria",
    "ProductValidation",
    "ReorderReport",
    "SearchCriteria",
    "parse_criteria",
]
