"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

WORKERS_PATH = "/workers"
SHIFTS_PATH = "/shifts"

# Console input format, 24-hour clock.
DATE_FORMAT = "%m-%d-%Y %H:%M"
DATE_FORMAT_DISPLAY = "MM-dd-yyyy HH:mm"

# Wire format for timestamps in JSON bodies.
WIRE_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

DEFAULT_PAGE_SIZE = 10
DEFAULT_API_TIMEOUT_SECONDS = 10.0
CANCELLED_MESSAGE = "Cancelled"
