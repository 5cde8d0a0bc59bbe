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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8080)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE = data.get("DB_POOL_SIZE", 10)
    DB_MAX_OVERFLOW = data.get("DB_MAX_OVERFLOW", 0)
    DB_POOL_RECYCLE_SECONDS = data.get("DB_POOL_RECYCLE_SECONDS", 180)
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", True))

    # Basic authentication in front of /api/invoices
    BASIC_AUTH_ENABLE = bool(data.get("BASIC_AUTH_ENABLE", False))
    BASIC_AUTH_USERNAME = data.get("BASIC_AUTH_USERNAME", "")
    BASIC_AUTH_PASSWORD = data.get("BASIC_AUTH_PASSWORD", "")
