"""Shelfman models."""

from shelfman.models.product import Product

__all__ = ["Product"]
