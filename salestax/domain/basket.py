"""Data models for a shopping basket and its tax breakdown."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class ProductCategory(Enum):
    """Tax category of a product. Only OTHER is subject to basic sales tax."""

    BOOK = "book"
    FOOD = "food"
    MEDICAL = "medical"
    OTHER = "other"


@dataclass(frozen=True)
class LineItem:
    """A single parsed line of shopping input."""

    quantity: int
    product: str
    unit_price: Decimal
    imported: bool = False
    sales_taxable: bool = True


@dataclass(frozen=True)
class LineTax:
    """Per-unit tax breakdown for a line item."""

    duty_tax: Decimal
    sales_tax: Decimal
    rounded_tax: Decimal
    final_price: Decimal


@dataclass
class Basket:
    """Ordered, append-only collection of line items for one receipt."""

    items: list[LineItem] = field(default_factory=list)

    def add(self, item: LineItem) -> int:
        """Append an item and return the number of items now in the basket."""
        self.items.append(item)
        return len(self.items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)
