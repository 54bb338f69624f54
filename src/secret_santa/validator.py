import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Sequence, Set

import pandas as pd

# local@domain.tld, no whitespace or extra '@' in any part
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PARTICIPANTS = 2


def normalize_email(value: Any) -> str:
    """Trims and lower-cases an email so it can be compared for identity."""
    return str(value).strip().lower()


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True
    return str(value).strip() == ''


@dataclass
class ValidationResult:
    """Outcome of validate_data. Invalid data is reported here, never raised."""
    valid: bool
    errors: List[str] = field(default_factory=list)


# --- Record Validation ---

def validate_data(records: Sequence[Mapping[str, Any]], required_fields: Sequence[str]) -> ValidationResult:
    """
    Checks a list of CSV records against a set of required columns.

    Verifies that the required columns exist, that their values are not empty,
    that email columns hold well-formed addresses, and that no email repeats
    within the same column. Errors are collected rather than raised, except
    that an empty input or a missing column stops the checks early.

    :param records: Rows as dictionaries; the header is taken from the first row.
    :param required_fields: Column names that must be present and non-empty.
    :return: A ValidationResult with every error message found.
    """
    errors: List[str] = []

    if not records:
        errors.append("Data is empty.")
        return ValidationResult(valid=False, errors=errors)

    headers = set(records[0].keys())
    for field_name in required_fields:
        if field_name not in headers:
            errors.append(f'Missing required column: "{field_name}".')

    # Per-row checks would only repeat the missing column on every row
    if errors:
        return ValidationResult(valid=False, errors=errors)

    email_fields = [f for f in required_fields if 'email' in f.lower()]
    seen_emails: Dict[str, Set[str]] = {f: set() for f in email_fields}

    for index, row in enumerate(records):
        row_num = index + 1

        for field_name in required_fields:
            if _is_blank(row.get(field_name)):
                errors.append(f"{field_name} is empty at row {row_num}.")

        for email_field in email_fields:
            value = row.get(email_field)
            if _is_blank(value):
                continue

            if not EMAIL_PATTERN.match(str(value).strip()):
                errors.append(f'Invalid email format "{value}" at row {row_num}.')
                continue

            email = normalize_email(value)
            if email in seen_emails[email_field]:
                errors.append(f'Duplicate email "{value}" in {email_field} at row {row_num}.')
            else:
                seen_emails[email_field].add(email)

    if len(records) < MIN_PARTICIPANTS:
        errors.append("At least 2 participants are required for Secret Santa.")

    return ValidationResult(valid=not errors, errors=errors)
