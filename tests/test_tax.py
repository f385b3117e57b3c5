"""Tests for tax computation and the round-up-to-0.05 rule."""

from decimal import Decimal

import pytest
from salestax.domain import LineItem
from salestax.receipt.tax import compute_line_tax, round_up_to_nearest


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0.075", "0.10"),
        ("0.5625", "0.60"),
        ("1.499", "1.50"),
        ("7.125", "7.15"),
        ("4.1985", "4.20"),
        ("0.50", "0.50"),
        ("0.01", "0.05"),
        ("0.049", "0.05"),
        ("0.001", "0.00"),
    ],
)
def test_round_up_to_nearest_truncates_cents_then_rounds_up(raw: str, expected: str) -> None:
    assert round_up_to_nearest(Decimal(raw)) == Decimal(expected)


def test_round_up_result_has_two_decimal_places() -> None:
    assert str(round_up_to_nearest(Decimal("1.499"))) == "1.50"


def test_zero_and_negative_amounts_are_unchanged() -> None:
    assert round_up_to_nearest(Decimal("0")) == Decimal("0")
    assert round_up_to_nearest(Decimal("-0.123")) == Decimal("-0.123")


@pytest.mark.parametrize("raw", ["0.075", "0.5625", "1.499", "0.35", "12.3456", "0.001"])
def test_round_up_is_idempotent(raw: str) -> None:
    once = round_up_to_nearest(Decimal(raw))
    assert round_up_to_nearest(once) == once


def test_round_up_never_rounds_down_below_truncated_cents() -> None:
    for cents in range(1, 500):
        amount = Decimal(cents).scaleb(-2)
        rounded = round_up_to_nearest(amount)
        assert rounded >= amount
        assert rounded - amount < Decimal("0.05")
        assert (rounded * 100) % 5 == 0


def test_exempt_domestic_item_has_no_tax() -> None:
    tax = compute_line_tax(LineItem(quantity=1, product="book", unit_price=Decimal("12.49"), sales_taxable=False))

    assert tax.duty_tax == 0
    assert tax.sales_tax == 0
    assert tax.rounded_tax == 0
    assert tax.final_price == Decimal("12.49")


def test_taxable_domestic_item() -> None:
    tax = compute_line_tax(LineItem(quantity=1, product="music CD", unit_price=Decimal("14.99")))

    assert tax.duty_tax == 0
    assert tax.sales_tax == Decimal("1.499")
    assert tax.rounded_tax == Decimal("1.50")
    assert tax.final_price == Decimal("16.49")


def test_imported_exempt_item_pays_duty_only() -> None:
    tax = compute_line_tax(
        LineItem(
            quantity=1,
            product="box of chocolates",
            unit_price=Decimal("10.00"),
            imported=True,
            sales_taxable=False,
        )
    )

    assert tax.duty_tax == Decimal("0.5")
    assert tax.sales_tax == 0
    assert tax.rounded_tax == Decimal("0.50")
    assert tax.final_price == Decimal("10.50")


def test_imported_taxable_item_rounds_combined_tax() -> None:
    tax = compute_line_tax(
        LineItem(quantity=1, product="bottle of perfume", unit_price=Decimal("47.50"), imported=True)
    )

    assert tax.duty_tax == Decimal("2.375")
    assert tax.sales_tax == Decimal("4.75")
    assert tax.rounded_tax == Decimal("7.15")
    assert tax.final_price == Decimal("54.65")


def test_free_item_has_no_tax() -> None:
    tax = compute_line_tax(LineItem(quantity=1, product="sample", unit_price=Decimal("0"), imported=True))

    assert tax.rounded_tax == 0
    assert tax.final_price == 0


def test_exact_decimal_tax_rounds_up_from_whole_cents() -> None:
    # 5.60 * 10% is exactly 0.56; a binary float gives 0.5599... and would land on 0.55.
    tax = compute_line_tax(LineItem(quantity=1, product="music CD", unit_price=Decimal("5.60")))

    assert tax.sales_tax == Decimal("0.560")
    assert tax.rounded_tax == Decimal("0.60")
    assert tax.final_price == Decimal("6.20")
