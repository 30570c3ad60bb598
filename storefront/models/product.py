"""
Product view models.

Pure data classes mirroring the fields the pages select from Shopify.
Nothing here is persisted; instances live for a single request.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class ProductVariant:
    """Product variant as returned by the Admin API."""
    id: str
    sku: Optional[str] = None
    price: Optional[str] = None
    created_at: Optional[str] = None   # ISO-8601 "createdAt"
    barcode: Optional[str] = None


@dataclass
class Product:
    """
    Product row on the listing screen.

    Only the first variant is kept, matching variants(first: 1)
    in the listing query.
    """
    id: str                 # Shopify gid, e.g. gid://shopify/Product/123
    title: str
    status: str             # ACTIVE, DRAFT or ARCHIVED
    variant: Optional[ProductVariant] = None

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.id:
            raise ValueError("Product id is required")

    @property
    def sku(self) -> Optional[str]:
        return self.variant.sku if self.variant else None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
