"""Shared pytest fixtures for salestax tests."""

from __future__ import annotations

import pytest
from salestax.receipt.catalog import ProductCatalog
from salestax.runtime import load_product_catalog


@pytest.fixture
def catalog() -> ProductCatalog:
    """The bundled default catalog."""
    return load_product_catalog()
