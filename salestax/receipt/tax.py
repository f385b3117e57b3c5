"""Sales tax and import duty calculation.

Basic sales tax is 10% on all goods except books, food and medical products.
Import duty is an additional 5% on all imported goods, with no exemptions.
For a tax rate of n%, a shelf price of p contains (np/100 rounded up to the
nearest 0.05) of tax. Rounding happens per line item, never on the total.
"""

from decimal import ROUND_FLOOR, Decimal

from salestax.domain.basket import LineItem, LineTax

SALES_TAX_RATE = Decimal("0.10")
IMPORT_DUTY_RATE = Decimal("0.05")
ROUNDING_STEP_CENTS = 5

_ZERO = Decimal("0")
_CENTS = 100


def round_up_to_nearest(amount: Decimal, step_cents: int = ROUNDING_STEP_CENTS) -> Decimal:
    """Round a positive amount up to the nearest ``step_cents`` cents.

    The amount is first truncated to whole cents, so 0.075 becomes 7 cents
    and then rounds up to 0.10. Zero and negative amounts are returned
    unchanged.
    """
    if amount <= _ZERO:
        return amount

    cents = int((amount * _CENTS).to_integral_value(rounding=ROUND_FLOOR))
    remainder = cents % step_cents
    if remainder > 0:
        cents += step_cents - remainder
    return Decimal(cents).scaleb(-2)


def compute_line_tax(item: LineItem) -> LineTax:
    """Compute duty, sales tax, rounded tax and taxed price for one unit of an item."""
    duty_tax = item.unit_price * IMPORT_DUTY_RATE if item.imported else _ZERO
    sales_tax = item.unit_price * SALES_TAX_RATE if item.sales_taxable else _ZERO
    rounded_tax = round_up_to_nearest(duty_tax + sales_tax)

    return LineTax(
        duty_tax=duty_tax,
        sales_tax=sales_tax,
        rounded_tax=rounded_tax,
        final_price=item.unit_price + rounded_tax,
    )
