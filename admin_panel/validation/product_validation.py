from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from admin_panel.core.product import CATEGORIES, STATUSES, Product
from admin_panel.validation.errors import ValidationError, ValidationIssue

MIN_NAME_LENGTH = 2
MIN_PRICE = 0.01


@dataclass
class ValidationResult:
    """
    Outcome of validating one candidate product.

    Exactly one of `record` / `errors` is meaningful: `record` is the
    normalised product when every field passed, `errors` maps field name
    to a human-readable message otherwise.
    """
    record: Optional[Product] = None
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> Dict[str, str]:
        return {i.field: i.message for i in self.issues if i.field}

    def raise_for_errors(self) -> Product:
        if self.issues:
            raise ValidationError(self.issues)
        return self.record


def _coerce_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def validate_product(candidate: Mapping[str, Any]) -> ValidationResult:
    """
    Check a candidate product against the field rules.

    All fields are checked so the caller can show every problem at once.
    Numbers arriving as strings (form inputs) are coerced. The store is
    never touched here; callers insert/update with `result.record`.
    """
    issues: list[ValidationIssue] = []

    name = candidate.get("name")
    if not isinstance(name, str) or len(name) < MIN_NAME_LENGTH:
        issues.append(ValidationIssue("NAME_TOO_SHORT", "Name must be at least 2 characters.", "name"))

    category = candidate.get("category")
    if not category:
        issues.append(ValidationIssue("CATEGORY_MISSING", "Please select a category.", "category"))
    elif category not in CATEGORIES:
        issues.append(
            ValidationIssue(
                "CATEGORY_UNKNOWN",
                f"Category must be one of: {', '.join(CATEGORIES)}.",
                "category",
            )
        )

    price = _coerce_number(candidate.get("price"))
    if price is None:
        issues.append(ValidationIssue("PRICE_NOT_NUMBER", "Price must be a number.", "price"))
    elif price < MIN_PRICE:
        issues.append(ValidationIssue("PRICE_TOO_LOW", "Price must be greater than 0.", "price"))

    stock = _coerce_number(candidate.get("stock"))
    if stock is None:
        issues.append(ValidationIssue("STOCK_NOT_NUMBER", "Stock must be a number.", "stock"))
    elif not float(stock).is_integer():
        issues.append(ValidationIssue("STOCK_NOT_INTEGER", "Stock must be a whole number.", "stock"))
    elif stock < 0:
        issues.append(ValidationIssue("STOCK_NEGATIVE", "Stock cannot be negative.", "stock"))

    status = candidate.get("status")
    if status not in STATUSES:
        issues.append(ValidationIssue("STATUS_INVALID", "Status must be active or inactive.", "status"))

    if issues:
        return ValidationResult(issues=issues)

    record_id = candidate.get("id") or None
    return ValidationResult(
        record=Product(
            id=str(record_id) if record_id is not None else None,
            name=name,
            category=category,
            price=price,
            stock=int(stock),
            status=status,
        )
    )
