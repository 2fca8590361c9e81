"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_SEARCH_LIMIT = 50
DEFAULT_LOG_LIMIT = 100
DEFAULT_CURRENCY = "LKR"

DASHBOARD_RECENT_COUNT = 3
DASHBOARD_UPCOMING_COUNT = 3

FIRST_PROJECT_NUMBER = 1000
PROJECT_CODE_PREFIX = "PJ"
PROJECT_CODE_PATTERN = r"^PJ\d{4,14}$"

MIN_PASSWORD_LENGTH = 6

# Column widths from database/schema.sql
MAX_EMPLOYEE_CODE_LENGTH = 50
MAX_NAME_LENGTH = 100
MAX_WHATSAPP_LENGTH = 20
MAX_EMAIL_LENGTH = 255
MAX_CLIENT_LENGTH = 255
MAX_PROJECT_TYPE_LENGTH = 100
