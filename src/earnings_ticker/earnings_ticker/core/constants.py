"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ANNUAL_WORKDAYS = 261
DEFAULT_DAYS_OFF_WORK = 26
DEFAULT_COOLDOWN_MINUTES = 10
DEFAULT_TICK_INTERVAL_SECONDS = 1.0

REUSE_OPTION = "Reuse"
RESET_OPTION = "Reset"
