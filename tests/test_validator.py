# test_validator.py

import pytest

from secret_santa.constants import EMPLOYEE_REQUIRED_FIELDS, LAST_YEAR_REQUIRED_FIELDS
from secret_santa.validator import normalize_email, validate_data

MIN_PARTICIPANTS_ERROR = "At least 2 participants are required for Secret Santa."


@pytest.fixture
def employee_records():
    """Provides a small, fully valid employee list."""
    return [
        {"Employee_Name": "Alice", "Employee_EmailID": "alice@x.com"},
        {"Employee_Name": "Bob", "Employee_EmailID": "bob@x.com"},
        {"Employee_Name": "Carol", "Employee_EmailID": "carol@x.com"},
    ]

# -----------------------------------------------------------------------------
# ## Success Scenarios
# -----------------------------------------------------------------------------

def test_valid_records_pass(employee_records):
    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is True
    assert result.errors == []


def test_valid_previous_year_records_pass():
    """Both email columns are checked, each against its own seen set."""
    records = [
        {"Employee_Name": "Alice", "Employee_EmailID": "alice@x.com",
         "Secret_Child_Name": "Bob", "Secret_Child_EmailID": "bob@x.com"},
        {"Employee_Name": "Bob", "Employee_EmailID": "bob@x.com",
         "Secret_Child_Name": "Alice", "Secret_Child_EmailID": "alice@x.com"},
    ]

    result = validate_data(records, LAST_YEAR_REQUIRED_FIELDS)

    assert result.valid is True


def test_extra_columns_are_ignored(employee_records):
    for record in employee_records:
        record["Department"] = ""

    assert validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS).valid


def test_normalize_email_trims_and_lowercases():
    assert normalize_email("  Alice@X.COM ") == "alice@x.com"

# -----------------------------------------------------------------------------
# ## Early Return Scenarios
# -----------------------------------------------------------------------------

def test_empty_data_reports_single_error():
    result = validate_data([], EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == ["Data is empty."]


def test_missing_column_stops_row_checks():
    """
    A missing column is reported once per column, and the row checks that
    would repeat it (and the participant count check) never run.
    """
    records = [{"Employee_Name": "Alice"}]

    result = validate_data(records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == ['Missing required column: "Employee_EmailID".']


def test_every_missing_column_is_reported():
    records = [{"Name": "Alice"}, {"Name": "Bob"}]

    result = validate_data(records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == [
        'Missing required column: "Employee_Name".',
        'Missing required column: "Employee_EmailID".',
    ]

# -----------------------------------------------------------------------------
# ## Row Level Failures
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("blank", ["", "   ", None])
def test_empty_value_reports_row_number(employee_records, blank):
    employee_records[1]["Employee_Name"] = blank

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == ["Employee_Name is empty at row 2."]


def test_nan_cell_counts_as_empty(employee_records):
    employee_records[0]["Employee_Name"] = float("nan")

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == ["Employee_Name is empty at row 1."]


def test_list_like_cell_does_not_raise(employee_records):
    """A non-scalar cell is judged by its text instead of crashing the NaN check."""
    employee_records[0]["Employee_Name"] = ["Alice", "Smith"]

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is True


def test_empty_email_is_not_format_checked(employee_records):
    employee_records[2]["Employee_EmailID"] = " "

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == ["Employee_EmailID is empty at row 3."]


@pytest.mark.parametrize("bad_email", ["foo", "foo@bar", "@bar.com", "foo@.com", "a b@c.com", "a@@b.com"])
def test_invalid_email_format(employee_records, bad_email):
    employee_records[0]["Employee_EmailID"] = bad_email

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == [f'Invalid email format "{bad_email}" at row 1.']


def test_email_with_surrounding_spaces_is_accepted(employee_records):
    employee_records[0]["Employee_EmailID"] = "  alice@x.com  "

    assert validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS).valid


def test_duplicate_email_reported_on_second_occurrence(employee_records):
    employee_records[2]["Employee_EmailID"] = " ALICE@x.com"

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == ['Duplicate email " ALICE@x.com" in Employee_EmailID at row 3.']


def test_malformed_email_does_not_count_towards_duplicates(employee_records):
    employee_records[0]["Employee_EmailID"] = "foo"
    employee_records[1]["Employee_EmailID"] = "foo"

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == [
        'Invalid email format "foo" at row 1.',
        'Invalid email format "foo" at row 2.',
    ]


def test_errors_are_collected_across_rows(employee_records):
    employee_records[0]["Employee_Name"] = ""
    employee_records[1]["Employee_EmailID"] = "nope"
    employee_records[2]["Employee_EmailID"] = "alice@x.com"

    result = validate_data(employee_records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == [
        "Employee_Name is empty at row 1.",
        'Invalid email format "nope" at row 2.',
        'Duplicate email "alice@x.com" in Employee_EmailID at row 3.',
    ]

# -----------------------------------------------------------------------------
# ## Participant Count
# -----------------------------------------------------------------------------

def test_single_participant_is_rejected():
    records = [{"Employee_Name": "Alice", "Employee_EmailID": "alice@x.com"}]

    result = validate_data(records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.valid is False
    assert result.errors == [MIN_PARTICIPANTS_ERROR]


def test_participant_count_error_follows_row_errors():
    records = [{"Employee_Name": "", "Employee_EmailID": "foo"}]

    result = validate_data(records, EMPLOYEE_REQUIRED_FIELDS)

    assert result.errors == [
        "Employee_Name is empty at row 1.",
        'Invalid email format "foo" at row 1.',
        MIN_PARTICIPANTS_ERROR,
    ]
