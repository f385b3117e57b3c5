"""Runtime infrastructure for the salestax project.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Product catalog loading via load_product_catalog()

Usage:
    from salestax.runtime import get_logger, load_product_catalog

    logger = get_logger(__name__)
    catalog = load_product_catalog()
"""

from salestax.runtime.catalog_rules import DEFAULT_CATALOG_PATH, load_product_catalog
from salestax.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    parse_log_level,
    set_log_level,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "parse_log_level",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Catalog
    "load_product_catalog",
    "DEFAULT_CATALOG_PATH",
]
