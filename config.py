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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./repair_shop.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Service order PDF
    SHOP_NAME = data.get("SHOP_NAME", "Taller de Computadores")
    SHOP_ADDRESS = data.get("SHOP_ADDRESS", "")
    SHOP_PHONE = data.get("SHOP_PHONE", "")
    SERVICE_CONDITIONS = data.get(
        "SERVICE_CONDITIONS",
        "Los equipos no reclamados después de 30 días no son responsabilidad del taller.",
    )

    # Statistics
    TOP_CLIENTS_LIMIT = data.get("TOP_CLIENTS_LIMIT", 10)
    CLIENT_SEARCH_LIMIT = data.get("CLIENT_SEARCH_LIMIT", 5)
