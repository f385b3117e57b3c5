"""Core domain models for the salestax project.

This module provides the data models used throughout the project:
- ProductCategory: Tax category of a catalog product
- LineItem, LineTax: One parsed input line and its tax breakdown
- Basket: Ordered line items for one receipt

Usage:
    from salestax.domain import Basket, LineItem, ProductCategory
"""

from salestax.domain.basket import Basket, LineItem, LineTax, ProductCategory

__all__ = [
    "Basket",
    "LineItem",
    "LineTax",
    "ProductCategory",
]
