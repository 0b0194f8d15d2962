from __future__ import annotations

from datetime import date

import pytest

from admin_panel.validation.errors import ValidationError
from admin_panel.validation.form_validation import (
    is_email,
    parse_iso_date,
    validate_login_form,
    validate_profile_form,
)

TODAY = date(2024, 5, 15)


def _profile(**overrides):
    values = {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@example.com",
        "phone": "",
        "dob": "1990-04-01",
        "gender": "female",
        "country": "uk",
        "address": "",
        "terms": True,
        "newsletter": None,
    }
    values.update(overrides)
    return values


def test_valid_profile_is_cleaned():
    cleaned = validate_profile_form(_profile(first_name=" Jane "), today=TODAY)

    assert cleaned["first_name"] == "Jane"
    assert cleaned["dob"] == date(1990, 4, 1)
    assert cleaned["phone"] is None
    assert cleaned["address"] is None
    assert cleaned["newsletter"] is False


def test_empty_profile_reports_every_required_field():
    with pytest.raises(ValidationError) as exc:
        validate_profile_form({}, today=TODAY)

    assert set(exc.value.field_errors) == {
        "first_name", "last_name", "email", "dob", "gender", "country", "terms",
    }
    assert exc.value.field_errors["terms"] == "You must agree to the terms and conditions."


def test_optional_fields_are_checked_when_given():
    with pytest.raises(ValidationError) as exc:
        validate_profile_form(_profile(phone="12345", address="abc"), today=TODAY)

    assert exc.value.field_errors == {
        "phone": "Phone number must be at least 10 characters.",
        "address": "Address must be at least 5 characters.",
    }


def test_date_of_birth_cannot_be_in_the_future():
    with pytest.raises(ValidationError) as exc:
        validate_profile_form(_profile(dob="2024-06-01"), today=TODAY)
    assert exc.value.field_errors == {"dob": "Date of birth cannot be in the future."}


def test_unknown_country_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_profile_form(_profile(country="zz"), today=TODAY)
    assert list(exc.value.field_errors) == ["country"]


def test_login_form_shape():
    validate_login_form("admin@example.com", "admin123")

    with pytest.raises(ValidationError) as exc:
        validate_login_form("not-an-email", "")
    assert set(exc.value.field_errors) == {"email", "password"}


@pytest.mark.parametrize(
    "value, expected",
    [("2024-05-15", date(2024, 5, 15)), ("2024-05-15T00:00:00", date(2024, 5, 15)), ("", None), ("bad", None)],
)
def test_parse_iso_date(value, expected):
    assert parse_iso_date(value) == expected


def test_is_email():
    assert is_email("a@b.co")
    assert not is_email("a@b")
    assert not is_email(None)
