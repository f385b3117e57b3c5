"""Checkout workflow orchestration: input lines -> basket -> receipt."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from salestax.domain.basket import Basket
from salestax.receipt.catalog import ProductCatalog
from salestax.receipt.formatter import ReceiptSummary, format_summary, summarize_basket
from salestax.receipt.line_parser import LineItemParseError, parse_line_item
from salestax.runtime import get_logger, load_product_catalog

logger = get_logger(__name__)

CheckoutStatus = Literal[
    "ok",
    "parse_error",
]


@dataclass(frozen=True)
class CheckoutRequest:
    """Inputs for running one receipt session."""

    lines: Iterable[str]
    catalog: ProductCatalog | None = None


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome from one receipt session."""

    status: CheckoutStatus
    basket: Basket = field(default_factory=Basket)
    summary: ReceiptSummary | None = None
    receipt: str | None = None
    error: str | None = None
    failed_line: str | None = None


def run_checkout(request: CheckoutRequest) -> CheckoutResult:
    """Read lines until the first blank one (or end of input), then price the basket.

    Lines are consumed lazily, so an interactive stdin stream is read one
    line at a time. The first malformed line ends the session with no
    receipt.
    """
    catalog = request.catalog if request.catalog is not None else load_product_catalog()
    basket = Basket()

    for raw_line in request.lines:
        line = raw_line.strip()
        if not line:
            break

        try:
            item = parse_line_item(line, catalog)
        except LineItemParseError as exc:
            logger.debug("Rejected line %r: %s", line, exc.reason)
            return CheckoutResult(
                status="parse_error",
                basket=basket,
                error=str(exc),
                failed_line=line,
            )

        count = basket.add(item)
        logger.debug("Basket now holds %d item(s)", count)

    summary = summarize_basket(basket)
    logger.info(
        "Receipt ready: %d item(s), sales taxes %.2f, total %.2f",
        len(basket),
        summary.total_tax,
        summary.total_price,
    )
    return CheckoutResult(
        status="ok",
        basket=basket,
        summary=summary,
        receipt=format_summary(summary),
    )
