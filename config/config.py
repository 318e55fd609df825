import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = int(os.getenv("DB_PORT", "3306"))
    DB_USER = os.getenv("DB_USER", "root")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "earnings_ticker")

    # Daily wage = annual salary / (ANNUAL_WORKDAYS - DAYS_OFF_WORK)
    ANNUAL_WORKDAYS = int(os.getenv("ANNUAL_WORKDAYS", "261"))
    DAYS_OFF_WORK = int(os.getenv("DAYS_OFF_WORK", "26"))

    COOLDOWN_MINUTES = float(os.getenv("COOLDOWN_MINUTES", "10"))
    TICK_INTERVAL_SECONDS = float(os.getenv("TICK_INTERVAL_SECONDS", "1"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_JSON = env_flag("LOG_JSON")


def db_config() -> dict:
    return {
        "host": Config.DB_HOST,
        "port": Config.DB_PORT,
        "user": Config.DB_USER,
        "password": Config.DB_PASSWORD,
        "database": Config.DB_NAME,
    }
