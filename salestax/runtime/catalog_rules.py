"""Runtime loader for the product catalog."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from salestax.receipt.catalog import ProductCatalog, build_product_catalog
from salestax.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "receipt" / "rules" / "default_catalog.toml"


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict; missing files map to empty dict."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    if not path.exists():
        logger.warning("Catalog file not found: %s", path)
        return {}

    with open(path, "rb") as f:
        data = tomllib.load(f)
    return data if isinstance(data, dict) else {}


@lru_cache(maxsize=8)
def load_product_catalog(catalog_paths: tuple[str, ...] | None = None) -> ProductCatalog:
    """Load the product catalog from TOML files into an immutable in-memory lookup."""
    if catalog_paths is None:
        catalog_files = [DEFAULT_CATALOG_PATH]
    else:
        catalog_files = [Path(path) for path in catalog_paths]

    catalog = build_product_catalog(tuple(_load_toml(path) for path in catalog_files))
    logger.debug("Loaded %d catalog products from %d file(s)", len(catalog), len(catalog_files))
    return catalog
