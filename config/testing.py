from .config import db_config

SECRET_KEY = "test-secret"
DB_CONFIG = db_config()

DEBUG = False
TESTING = True

STATE_BACKEND = "memory"
AUTO_INIT_DB = False

ANNUAL_WORKDAYS = 261
DAYS_OFF_WORK = 26
COOLDOWN_MINUTES = 10
TICK_INTERVAL_SECONDS = 1

LOG_LEVEL = "WARNING"
LOG_JSON = False
