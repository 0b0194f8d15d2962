from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, Mapping, Optional

from admin_panel.validation.errors import ValidationError, ValidationIssue

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

GENDERS = ("male", "female", "other")

COUNTRIES: Dict[str, str] = {
    "us": "United States",
    "ca": "Canada",
    "uk": "United Kingdom",
    "au": "Australia",
    "de": "Germany",
    "fr": "France",
    "jp": "Japan",
}


def parse_iso_date(value: Any) -> Optional[date]:
    if isinstance(value, date):
        return value
    if not value:
        return None
    try:
        # DatePickerSingle sends "YYYY-MM-DD" (sometimes with a time part)
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        return None


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value.strip()))


def validate_profile_form(values: Mapping[str, Any], *, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Validate the profile form on the Forms page.

    Returns the cleaned values. Raises ValidationError carrying one issue
    per failing field; every field is checked before raising.
    """
    today = today or date.today()
    issues: list[ValidationIssue] = []

    first_name = (values.get("first_name") or "").strip()
    if len(first_name) < 2:
        issues.append(ValidationIssue("FIRST_NAME", "First name must be at least 2 characters.", "first_name"))

    last_name = (values.get("last_name") or "").strip()
    if len(last_name) < 2:
        issues.append(ValidationIssue("LAST_NAME", "Last name must be at least 2 characters.", "last_name"))

    email = (values.get("email") or "").strip()
    if not is_email(email):
        issues.append(ValidationIssue("EMAIL", "Please enter a valid email address.", "email"))

    # Optional fields: only checked when filled in
    phone = (values.get("phone") or "").strip()
    if phone and len(phone) < 10:
        issues.append(ValidationIssue("PHONE", "Phone number must be at least 10 characters.", "phone"))

    dob = parse_iso_date(values.get("dob"))
    if dob is None:
        issues.append(ValidationIssue("DOB", "Please select a date of birth.", "dob"))
    elif dob > today:
        issues.append(ValidationIssue("DOB_FUTURE", "Date of birth cannot be in the future.", "dob"))

    gender = values.get("gender")
    if gender not in GENDERS:
        issues.append(ValidationIssue("GENDER", "Please select a gender.", "gender"))

    country = values.get("country")
    if not country or country not in COUNTRIES:
        issues.append(ValidationIssue("COUNTRY", "Please select a country.", "country"))

    address = (values.get("address") or "").strip()
    if address and len(address) < 5:
        issues.append(ValidationIssue("ADDRESS", "Address must be at least 5 characters.", "address"))

    if values.get("terms") is not True:
        issues.append(ValidationIssue("TERMS", "You must agree to the terms and conditions.", "terms"))

    if issues:
        raise ValidationError(issues)

    return {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": phone or None,
        "dob": dob,
        "gender": gender,
        "country": country,
        "address": address or None,
        "terms": True,
        "newsletter": bool(values.get("newsletter")),
    }


def validate_login_form(email: Any, password: Any) -> None:
    """Shape check before credentials are compared."""
    issues: list[ValidationIssue] = []
    if not is_email(email):
        issues.append(ValidationIssue("EMAIL", "Please enter a valid email address.", "email"))
    if not password:
        issues.append(ValidationIssue("PASSWORD", "Password is required.", "password"))
    if issues:
        raise ValidationError(issues)
