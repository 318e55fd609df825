import os

from .config import Config, db_config, env_flag

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = db_config()

DEBUG = True

# mysql | memory
STATE_BACKEND = os.getenv("STATE_BACKEND", "mysql")

# If enabled, app creates the ticker_state table on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")

ANNUAL_WORKDAYS = Config.ANNUAL_WORKDAYS
DAYS_OFF_WORK = Config.DAYS_OFF_WORK
COOLDOWN_MINUTES = Config.COOLDOWN_MINUTES
TICK_INTERVAL_SECONDS = Config.TICK_INTERVAL_SECONDS

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = Config.LOG_JSON
