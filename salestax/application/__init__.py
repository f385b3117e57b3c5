"""Receipt session workflows."""

from salestax.application.checkout import CheckoutRequest, CheckoutResult, run_checkout

__all__ = [
    "CheckoutRequest",
    "CheckoutResult",
    "run_checkout",
]
