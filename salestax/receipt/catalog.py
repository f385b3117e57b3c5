"""Product catalog used to decide which line items carry basic sales tax.

The catalog maps exact product names to a ProductCategory. Lookups are
case and whitespace sensitive; the caller passes an already trimmed name.
Anything not in the catalog is treated as ProductCategory.OTHER.

Default rows live in salestax/receipt/rules/default_catalog.toml and are
loaded by salestax.runtime.catalog_rules.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from salestax.domain.basket import ProductCategory

# Categories exempt from basic sales tax. Import duty has no exemptions.
SALES_TAX_EXEMPT_CATEGORIES = frozenset({ProductCategory.BOOK, ProductCategory.FOOD, ProductCategory.MEDICAL})


class CatalogConfigError(ValueError):
    """Raised when catalog configuration rows cannot be understood."""


@dataclass(frozen=True)
class ProductCatalog:
    """Immutable product name -> category lookup."""

    entries: Mapping[str, ProductCategory]

    def category_of(self, product: str) -> ProductCategory:
        """Return the category for a product, defaulting to OTHER."""
        return self.entries.get(product, ProductCategory.OTHER)

    def is_sales_taxable(self, product: str) -> bool:
        return self.category_of(product) not in SALES_TAX_EXEMPT_CATEGORIES

    def __contains__(self, product: object) -> bool:
        return product in self.entries

    def __len__(self) -> int:
        return len(self.entries)


def _parse_category(raw: Any, product: str) -> ProductCategory:
    value = str(raw).strip().lower()
    try:
        return ProductCategory(value)
    except ValueError:
        raise CatalogConfigError(f"Unknown category {raw!r} for product {product!r}") from None


def build_product_catalog(catalog_configs: Sequence[Mapping[str, Any]] | None = None) -> ProductCatalog:
    """Build a catalog from in-memory configs; later configs override earlier ones.

    Each config is expected to look like a parsed TOML document with
    ``[[products]]`` tables holding ``name`` and ``category`` keys.
    """
    entries: dict[str, ProductCategory] = {}
    for config in catalog_configs or ():
        for row in config.get("products", []):
            if not isinstance(row, Mapping):
                raise CatalogConfigError(f"Catalog row must be a table, got {row!r}")

            name = str(row.get("name") or "").strip()
            if not name:
                raise CatalogConfigError(f"Catalog row is missing a product name: {dict(row)!r}")

            entries[name] = _parse_category(row.get("category", ProductCategory.OTHER.value), name)

    return ProductCatalog(entries=MappingProxyType(entries))
