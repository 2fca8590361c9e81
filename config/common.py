"""Settings shared by every environment."""

import os

CURRENCY = os.getenv("CURRENCY", "LKR")

# Cap on results of the global search box
SEARCH_RESULT_LIMIT = int(os.getenv("SEARCH_RESULT_LIMIT", "50"))

# 'earnings' (amount paid to the employee) or 'revenue' (client price of their projects)
EMPLOYEE_RANKING = os.getenv("EMPLOYEE_RANKING", "earnings")

COMPANY = {
    "name": os.getenv("COMPANY_NAME", "OGO TECHNOLOGY"),
    "department": os.getenv("COMPANY_DEPARTMENT", "Department of Academic Services"),
    "city": os.getenv("COMPANY_CITY", "Galle, Sri Lanka"),
    "phone": os.getenv("COMPANY_PHONE", "+94 75 930 7059"),
    "email": os.getenv("COMPANY_EMAIL", "info@ogotechnology.com"),
}

REPORT_FILENAME_PREFIX = os.getenv("REPORT_FILENAME_PREFIX", "OGO-Analytics")

DEMO_ADMIN_EMAIL = os.getenv("DEMO_ADMIN_EMAIL", "admin@ogotechnology.com")
DEMO_ADMIN_PASSWORD = os.getenv("DEMO_ADMIN_PASSWORD", "admin123")
