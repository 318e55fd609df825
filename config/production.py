import os

from .config import Config, db_config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = db_config()

DEBUG = False

STATE_BACKEND = os.getenv("STATE_BACKEND", "mysql")
AUTO_INIT_DB = env_flag("AUTO_INIT_DB")

ANNUAL_WORKDAYS = Config.ANNUAL_WORKDAYS
DAYS_OFF_WORK = Config.DAYS_OFF_WORK
COOLDOWN_MINUTES = Config.COOLDOWN_MINUTES
TICK_INTERVAL_SECONDS = Config.TICK_INTERVAL_SECONDS

LOG_LEVEL = Config.LOG_LEVEL
LOG_JSON = env_flag("LOG_JSON", "1")
