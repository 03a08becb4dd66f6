import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./subscriptions.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # IANA zone used to decide what "today" is for billing queries
    BILLING_TIMEZONE = data.get("BILLING_TIMEZONE", "UTC")

    # Upcoming Billing Configuration
    UPCOMING_HORIZON_DAYS = int(data.get("UPCOMING_HORIZON_DAYS", 3))
    UPCOMING_SCAN_ENABLED = bool(data.get("UPCOMING_SCAN_ENABLED", True))
    UPCOMING_SCAN_RUN_HOUR = int(data.get("UPCOMING_SCAN_RUN_HOUR", 9))  # Local hour in BILLING_TIMEZONE
    UPCOMING_NOTIFICATION_WEBHOOK = data.get("UPCOMING_NOTIFICATION_WEBHOOK", None)
