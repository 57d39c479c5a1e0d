"""Tests for Shelfman adapters."""

from decimal import Decimal

import pytest

from shelfman.adapters import ShelfmanCatalogueBackend
from shelfman.models import Product
from shelfman.protocols import CatalogueBackend


@pytest.fixture
def backend(catalogue):
    catalogue.add_product(Product("B125", "Product 6", 10, 10, Decimal("10.00")))
    return ShelfmanCatalogueBackend(catalogue)


class TestShelfmanCatalogueBackend:
    def test_implements_protocol(self, backend):
        assert isinstance(backend, CatalogueBackend)

    def test_get_product(self, backend):
        assert backend.get_product("A123").name == "Product 1"
        assert backend.get_product("A321") is None

    def test_validate_not_found(self, backend):
        result = backend.validate_product_id("A321")
        assert result.valid is False
        assert result.error_code == "not_found"
        assert result.message == "Product 'A321' not found"

    def test_validate_ok(self, backend):
        result = backend.validate_product_id("A123")
        assert result.valid is True
        assert result.name == "Product 1"
        assert result.needs_reorder is False
        assert result.message is None

    def test_validate_needs_reorder(self, backend):
        result = backend.validate_product_id("B125")
        assert result.valid is True
        assert result.needs_reorder is True
        assert result.message == "Product needs reorder"

    def test_reorder_ids(self, backend):
        assert backend.reorder_ids() == ["B125"]

    def test_tracks_catalogue_changes(self, catalogue, backend):
        catalogue.remove_product_by_id("B125")
        assert backend.reorder_ids() == []
        assert backend.get_product("B125") is None

    def test_default_catalogue_is_empty(self):
        assert ShelfmanCatalogueBackend().reorder_ids() == []
