from __future__ import annotations

import pytest

from admin_panel.validation.errors import ValidationError
from admin_panel.validation.product_validation import validate_product


def _valid(**overrides):
    values = {"name": "Widget", "category": "Toys", "price": 9.99, "stock": 5, "status": "active"}
    values.update(overrides)
    return values


def test_valid_candidate_is_normalised():
    result = validate_product(_valid(price="12.50", stock="7"))

    assert result.ok
    assert result.errors == {}
    assert result.record.name == "Widget"
    assert result.record.price == 12.5
    assert result.record.stock == 7
    assert isinstance(result.record.stock, int)
    assert result.record.id is None


def test_every_field_is_checked_at_once():
    result = validate_product({"name": "W", "category": "", "price": 0, "stock": -1, "status": "archived"})

    assert not result.ok
    assert result.errors == {
        "name": "Name must be at least 2 characters.",
        "category": "Please select a category.",
        "price": "Price must be greater than 0.",
        "stock": "Stock cannot be negative.",
        "status": "Status must be active or inactive.",
    }
    assert result.record is None


@pytest.mark.parametrize(
    "overrides, field, code",
    [
        ({"category": "Groceries"}, "category", "CATEGORY_UNKNOWN"),
        ({"price": "abc"}, "price", "PRICE_NOT_NUMBER"),
        ({"price": None}, "price", "PRICE_NOT_NUMBER"),
        ({"price": 0.001}, "price", "PRICE_TOO_LOW"),
        ({"stock": "2.5"}, "stock", "STOCK_NOT_INTEGER"),
        ({"stock": ""}, "stock", "STOCK_NOT_NUMBER"),
        ({"name": None}, "name", "NAME_TOO_SHORT"),
    ],
)
def test_single_field_failures(overrides, field, code):
    result = validate_product(_valid(**overrides))

    assert not result.ok
    assert [i.code for i in result.issues] == [code]
    assert list(result.errors) == [field]


def test_minimum_price_is_accepted():
    assert validate_product(_valid(price=0.01)).ok


def test_raise_for_errors():
    assert validate_product(_valid()).raise_for_errors().name == "Widget"

    with pytest.raises(ValidationError) as exc:
        validate_product(_valid(name="")).raise_for_errors()
    assert exc.value.field_errors == {"name": "Name must be at least 2 characters."}


def test_existing_id_is_carried_through():
    result = validate_product(_valid(id="PRD-1010"))
    assert result.record.id == "PRD-1010"


@pytest.mark.parametrize("name", [" A", "AB", "  "])
def test_name_length_counts_whitespace_and_name_is_kept_verbatim(name):
    result = validate_product(_valid(name=name))

    assert result.ok
    assert result.record.name == name


def test_one_character_name_is_rejected():
    assert validate_product(_valid(name="A")).errors == {"name": "Name must be at least 2 characters."}
