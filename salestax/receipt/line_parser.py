"""Parse console shopping input into LineItem objects.

Expected line format::

    numitems [imported] product name at price

Examples:
    1 book at 12.49
    1 imported box of chocolates at 10.00
"""

import re
from decimal import Decimal

from salestax.domain.basket import LineItem
from salestax.receipt.catalog import ProductCatalog
from salestax.runtime.catalog_rules import load_product_catalog
from salestax.runtime.logging import get_logger

logger = get_logger(__name__)

PRICE_SEPARATOR = " at "
IMPORTED_TOKEN = "imported"

USAGE = "usage:   numitems [imported] product name at price"
EXAMPLE = "example: 1 imported box of chocolates at 10.00"

# Prices at or above 10**MAX_PRICE_DIGITS are rejected before any tax arithmetic
MAX_PRICE_DIGITS = 12

_PRICE_RE = re.compile(r"^\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
_QUANTITY_RE = re.compile(r"^[+-]?[0-9]+$")
_WHITESPACE_RE = re.compile(r"\s+")


class LineItemParseError(ValueError):
    """Raised when a line of input does not match the expected format."""

    title = "line item input format exception"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(self.render())

    def render(self) -> str:
        lines = [
            f"...{self.title}:",
            f"...{self.reason}",
            f"...\t{USAGE}",
            f"...\t{EXAMPLE}",
        ]
        return "\n".join(lines)


class FormatError(LineItemParseError):
    """Missing ' at ' separator, or no quantity/product split."""


class PriceFormatError(LineItemParseError):
    title = "price parsing exception"


class AmountFormatError(LineItemParseError):
    title = "amount parsing exception"


def _parse_price(text: str) -> Decimal:
    price_str = text.strip()
    if not _PRICE_RE.match(price_str):
        raise PriceFormatError(f"please input the PRICE as a non-negative decimal number, got {price_str!r}")
    price = Decimal(price_str)
    if price and price.adjusted() >= MAX_PRICE_DIGITS:
        raise PriceFormatError(f"please input the PRICE below 1e{MAX_PRICE_DIGITS}, got {price_str!r}")
    return price


def _parse_quantity(text: str) -> int:
    amount_str = text.strip()
    if not _QUANTITY_RE.match(amount_str):
        raise AmountFormatError(f"please input the AMOUNT as an integer, got {amount_str!r}")
    return int(amount_str)


def parse_line_item(raw_line: str, catalog: ProductCatalog | None = None) -> LineItem:
    """
    Parse one line of shopping input.

    The word "imported" is detected as a plain substring anywhere before the
    price, so it also matches inside longer words. Quantity is not checked
    for positivity.

    Args:
        raw_line: Raw console line, e.g. "1 imported bottle of perfume at 47.50"
        catalog: Product catalog used to decide sales tax applicability.
            Defaults to the bundled catalog.

    Returns:
        The parsed LineItem.

    Raises:
        FormatError, PriceFormatError, AmountFormatError
    """
    segments = raw_line.strip().split(PRICE_SEPARATOR)
    if len(segments) != 2:
        raise FormatError("missing or malformed ' at ' separator; please input the LINE ITEM in the format below")

    amount_product_str, price_str = segments
    price = _parse_price(price_str)

    if amount_product_str == "":
        raise FormatError("please input the NUMBER of ITEMS, PRODUCT NAME and IMPORTED FLAG in the format below")

    imported = IMPORTED_TOKEN in amount_product_str
    if imported:
        amount_product_str = amount_product_str.replace(IMPORTED_TOKEN, "", 1)

    amount_product = _WHITESPACE_RE.split(amount_product_str, maxsplit=1)
    if len(amount_product) != 2:
        raise FormatError("please input the NUMBER of ITEMS and PRODUCT NAME in the format below")

    quantity = _parse_quantity(amount_product[0])
    product = amount_product[1].strip()
    if catalog is None:
        catalog = load_product_catalog()

    item = LineItem(
        quantity=quantity,
        product=product,
        unit_price=price,
        imported=imported,
        sales_taxable=catalog.is_sales_taxable(product),
    )
    logger.debug("Parsed %r as %s (category=%s)", raw_line, item, catalog.category_of(product).value)
    return item
