"""Format a Basket as a printed receipt."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from salestax.domain.basket import LineItem, LineTax
from salestax.receipt.line_parser import IMPORTED_TOKEN
from salestax.receipt.tax import compute_line_tax


@dataclass(frozen=True)
class ReceiptLine:
    """One printed receipt line with the amounts behind it."""

    item: LineItem
    tax: LineTax
    line_tax: Decimal
    line_total: Decimal

    def render(self) -> str:
        if self.item.imported:
            return f"{self.item.quantity} {IMPORTED_TOKEN} {self.item.product}: {self.line_total:.2f}"
        return f"{self.item.quantity} {self.item.product}: {self.line_total:.2f}"


@dataclass(frozen=True)
class ReceiptSummary:
    """All receipt lines plus aggregate tax and grand total."""

    lines: tuple[ReceiptLine, ...]
    total_tax: Decimal
    total_price: Decimal


def build_receipt_line(item: LineItem) -> ReceiptLine:
    """
    Price a single line item.

    Tax is computed and rounded per unit, then scaled by the quantity.
    """
    tax = compute_line_tax(item)
    return ReceiptLine(
        item=item,
        tax=tax,
        line_tax=tax.rounded_tax * item.quantity,
        line_total=tax.final_price * item.quantity,
    )


def summarize_basket(items: Iterable[LineItem]) -> ReceiptSummary:
    """Price every item in order and accumulate the totals."""
    lines = tuple(build_receipt_line(item) for item in items)

    total_tax = Decimal("0")
    total_price = Decimal("0")
    for line in lines:
        # Sum of already-rounded line taxes
        total_tax += line.line_tax
        total_price += line.line_total

    return ReceiptSummary(lines=lines, total_tax=total_tax, total_price=total_price)


def format_summary(summary: ReceiptSummary) -> str:
    output = [line.render() for line in summary.lines]
    output.append(f"Sales Taxes: {summary.total_tax:.2f}")
    output.append(f"Total: {summary.total_price:.2f}")
    return "\n".join(output)


def format_receipt(items: Iterable[LineItem]) -> str:
    """
    Format line items as receipt text.

    Args:
        items: Basket or any ordered iterable of line items

    Returns:
        One line per item, then the "Sales Taxes" and "Total" lines,
        joined with newlines (no trailing newline).
    """
    return format_summary(summarize_basket(items))
