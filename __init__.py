"""
Django Shelfman - In-memory product catalogue.

Usage:
    from shelfman import Catalogue, Product, CatalogError

    catalogue = Catalogue("Main Store")
    catalogue.add_product(Product("A123", "Product 1", 100, 10, "10.00"))
    report = catalogue.check_reorders()
    cheap = catalogue.search({"price": "5.00"})
"""


def __getattr__(name):
    if name == "Catalogue":
        from shelfman.service import Catalogue

        return Catalogue
    elif name == "Product":
        from shelfman.models import Product

        return Product
    elif name == "CatalogError":
        from shelfman.exceptions import CatalogError

        return CatalogError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["Catalogue", "Product", "CatalogError"]
__version__ = "0.1.0"
