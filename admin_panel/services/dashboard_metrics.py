from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

import pandas as pd

from admin_panel.core.product import CATEGORIES, Product

TIME_RANGES: tuple[str, ...] = ("Today", "Last 7 Days", "This Month", "Last Quarter", "This Year")
DEFAULT_TIME_RANGE = "This Month"

# Mock series shown on the dashboard
REVENUE_BY_MONTH: Dict[str, int] = {
    "Jan": 4000, "Feb": 3000, "Mar": 5000, "Apr": 7000, "May": 6000, "Jun": 9000,
    "Jul": 8000, "Aug": 10000, "Sep": 11000, "Oct": 12000, "Nov": 15000, "Dec": 18000,
}

SALES_BY_WEEKDAY: Dict[str, int] = {
    "Mon": 5400, "Tue": 6200, "Wed": 7800, "Thu": 6800, "Fri": 9200, "Sat": 11000, "Sun": 9000,
}

USERS_BY_DEVICE: Dict[str, int] = {"Desktop": 45, "Mobile": 35, "Tablet": 20}


@dataclass(frozen=True)
class StatCard:
    title: str
    value: str
    change: str
    trend: str  # "up" | "down"
    icon: str


STAT_CARDS: List[StatCard] = [
    StatCard("Total Revenue", "$85,200", "+12.5%", "up", "bi-currency-dollar"),
    StatCard("New Users", "1,240", "+8.2%", "up", "bi-people"),
    StatCard("Orders", "852", "-2.4%", "down", "bi-cart"),
    StatCard("Conversion Rate", "3.24%", "+4.7%", "up", "bi-activity"),
]


def format_currency(value: float) -> str:
    """Whole-dollar USD formatting, e.g. 85200 -> "$85,200"."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def series_frame(series: Dict[str, int], label: str, value: str) -> pd.DataFrame:
    return pd.DataFrame({label: list(series.keys()), value: list(series.values())})


def products_frame(records: Iterable[Product]) -> pd.DataFrame:
    return pd.DataFrame(
        [r.to_dict() for r in records],
        columns=["id", "name", "category", "price", "stock", "status"],
    )


def inventory_summary(records: Iterable[Product]) -> pd.DataFrame:
    """
    One row per category (every known category, even empty ones):

    - products: number of products
    - units: total stock
    - stock_value: sum of price * stock
    - active: number of active products
    """
    df = products_frame(records)
    if df.empty:
        summary = pd.DataFrame(
            {"category": list(CATEGORIES), "products": 0, "units": 0, "stock_value": 0.0, "active": 0}
        )
        return summary

    df["stock_value"] = df["price"] * df["stock"]
    df["is_active"] = (df["status"] == "active").astype(int)

    grouped = (
        df.groupby("category")
        .agg(
            products=("id", "count"),
            units=("stock", "sum"),
            stock_value=("stock_value", "sum"),
            active=("is_active", "sum"),
        )
        .reindex(list(CATEGORIES), fill_value=0)
        .reset_index()
        .rename(columns={"index": "category"})
    )
    grouped["stock_value"] = grouped["stock_value"].astype(float).round(2)
    return grouped


def status_counts(records: Iterable[Product]) -> Dict[str, int]:
    df = products_frame(records)
    counts = df["status"].value_counts()
    return {"active": int(counts.get("active", 0)), "inactive": int(counts.get("inactive", 0))}


def low_stock(records: Iterable[Product], threshold: int = 10, limit: int = 5) -> List[Product]:
    """Active products at or below `threshold` units, lowest first."""
    items = [r for r in records if r.status == "active" and r.stock <= threshold]
    return sorted(items, key=lambda r: r.stock)[:limit]
