# --- constants.py ---
# Column names shared by the CSV files and the validator.

EMPLOYEE_NAME = "Employee_Name"
EMPLOYEE_EMAIL = "Employee_EmailID"
SECRET_CHILD_NAME = "Secret_Child_Name"
SECRET_CHILD_EMAIL = "Secret_Child_EmailID"

# Required fields for the employee CSV
EMPLOYEE_REQUIRED_FIELDS = [EMPLOYEE_NAME, EMPLOYEE_EMAIL]

# Required fields for the previous year assignment CSV
LAST_YEAR_REQUIRED_FIELDS = [
    EMPLOYEE_NAME,
    EMPLOYEE_EMAIL,
    SECRET_CHILD_NAME,
    SECRET_CHILD_EMAIL,
]

# Output has the same layout as the previous year file so it can be fed back in
ASSIGNMENT_FIELDS = list(LAST_YEAR_REQUIRED_FIELDS)

# Upper bound on shuffles tried before giving up
MAX_ATTEMPTS = 1000

OUTPUT_FILENAME_PREFIX = "secret_santa_assignments"
