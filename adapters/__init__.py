"""Shelfman adapters."""

from shelfman.adapters.catalogue_backend import ShelfmanCatalogueBackend

__all__ = [
    "ShelfmanCatalogueBackend",
]
