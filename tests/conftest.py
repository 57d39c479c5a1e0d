"""Pytest fixtures for Shelfman tests."""

from decimal import Decimal

import django
import pytest
from django.conf import settings

from shelfman.models import Product
from shelfman.protocols import Batch
from shelfman.service import Catalogue


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["shelfman"],
            SHELFMAN={},
        )
        django.setup()


@pytest.fixture
def catalogue():
    """Catalogue seeded with three products that do not need reorder, all priced 10.00."""
    cat = Catalogue("Test Catalogue")
    cat.add_product(Product("A123", "Product 1", 100, 10, Decimal("10.00")))
    cat.add_product(Product("A124", "Product 2", 100, 10.0))  # price omitted: default applies
    cat.add_product(Product("A125", "Product 3", 100, 10, Decimal("10.00")))
    return cat


@pytest.fixture
def empty_catalogue():
    return Catalogue("Empty Catalogue")


@pytest.fixture
def widgets(catalogue):
    """Add two pricier, differently named products."""
    catalogue.add_product(Product("W123", "Widget 1", 100, 10, Decimal("12.00")))
    catalogue.add_product(Product("W124", "Widget 2", 100, 10, Decimal("14.00")))
    return catalogue


@pytest.fixture
def batch():
    """Batch of two new products with stock."""
    return Batch(
        products=(
            Product("A126", "Product 6", 100, 10, Decimal("10.00")),
            Product("A127", "Product 7", 100, 10, Decimal("10.00")),
        )
    )
