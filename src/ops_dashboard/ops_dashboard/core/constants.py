"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Collection names in the document store.
PENDING_WORKS = "pendingWorks"
MEMBERSHIP_MEMBERS = "membershipMembers"
EMPLOYEES = "employees"
ATTENDANCE = "attendance"
UPADS = "upads"
OTHER_EXPENSES = "otherExpenses"

ALL_COLLECTIONS = (
    PENDING_WORKS,
    MEMBERSHIP_MEMBERS,
    EMPLOYEES,
    ATTENDANCE,
    UPADS,
    OTHER_EXPENSES,
)

# Store-managed timestamp fields.
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

DEFAULT_DAY_RATE = 400
DEFAULT_SESSION_HOURS = 12
DEFAULT_CASCADE_WORKERS = 8

# Attendance defaults used by bulk marking and status edits.
DEFAULT_CHECK_IN = "09:00"
DEFAULT_CHECK_OUT = "18:00"
HALF_DAY_CHECK_OUT = "13:00"
FULL_DAY_HOURS = 9
HALF_DAY_HOURS = 4.5

# Image handling.
EMPLOYEE_PHOTO_FOLDER = "employees/photos"
EMPLOYEE_AADHAR_FOLDER = "employees/aadhar"
IMAGE_MAX_WIDTH = 800
IMAGE_MAX_HEIGHT = 800
IMAGE_JPEG_QUALITY = 70

DEFAULT_UPAD_HISTORY = 10
CURRENCY_SYMBOL = "₹"
