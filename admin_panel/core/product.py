from __future__ import annotations

import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Clothing",
    "Books",
    "Home & Kitchen",
    "Toys",
    "Sports",
    "Beauty",
)

STATUSES: tuple[str, ...] = ("active", "inactive")

# Columns the table can be sorted by, in display order
PRODUCT_FIELDS: tuple[str, ...] = ("id", "name", "category", "price", "stock", "status")

ID_PREFIX = "PRD-"
ID_BASE = 1000

SAMPLE_NAMES: tuple[str, ...] = (
    "Premium Headphones", "Wireless Keyboard", "Smart Watch", "Bluetooth Speaker",
    "Cotton T-Shirt", "Denim Jeans", "Leather Jacket", "Summer Dress",
    "Science Fiction Novel", "Cookbook", "Biography", "Children's Book",
    "Coffee Maker", "Blender", "Toaster", "Vacuum Cleaner",
    "Action Figure", "Board Game", "Building Blocks", "Remote Control Car",
    "Basketball", "Yoga Mat", "Tennis Racket", "Dumbbells",
    "Face Cream", "Shampoo", "Perfume", "Makeup Set",
)


def make_product_id(n: int) -> str:
    return f"{ID_PREFIX}{n}"


@dataclass(frozen=True)
class Product:
    """
    One row of the product inventory.

    Fields:

    - id: store-assigned identifier ("PRD-1000"); None until inserted
    - name: display name, at least 2 characters
    - category: one of CATEGORIES
    - price: unit price, >= 0.01
    - stock: units on hand, >= 0
    - status: "active" or "inactive"

    Instances are immutable; updates go through dataclasses.replace.
    """

    name: str
    category: str
    price: float
    stock: int
    status: str = "active"
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Product:
        return cls(
            id=data.get("id"),
            name=str(data.get("name", "")),
            category=str(data.get("category", "")),
            price=float(data.get("price", 0.0)),
            stock=int(data.get("stock", 0)),
            status=str(data.get("status", "active")),
        )


def generate_products(count: int, rng: Optional[random.Random] = None) -> List[Product]:
    """
    Build `count` sample products with sequential ids starting at PRD-1000.

    Prices fall in [10, 110), stock in [0, 100) and roughly 80% of the
    products are active. Pass a seeded `rng` for reproducible data.
    """
    rng = rng or random.Random()
    return [
        Product(
            id=make_product_id(ID_BASE + i),
            name=rng.choice(SAMPLE_NAMES),
            category=rng.choice(CATEGORIES),
            price=round(rng.random() * 100 + 10, 2),
            stock=rng.randrange(100),
            status="active" if rng.random() > 0.2 else "inactive",
        )
        for i in range(count)
    ]
