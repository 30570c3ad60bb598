"""
View models for products listed and created through the Admin API.

This module contains pure data classes with no business logic.
"""

from .product import Product, ProductVariant

__all__ = ['Product', 'ProductVariant']
