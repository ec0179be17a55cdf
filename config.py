import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./game_catalog.db")
    DB_POOL_SIZE = int(data.get("DB_POOL_SIZE", 10))
    DB_MAX_OVERFLOW = int(data.get("DB_MAX_OVERFLOW", 0))
    MONGO_URI = data.get("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME = data.get("MONGO_DB_NAME", "gamedb")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENVIRONMENT = data.get("ENVIRONMENT", "development")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_MINUTES = int(data.get("JWT_EXPIRES_MINUTES", 24 * 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    RATE_LIMIT_ENABLED = bool(data.get("RATE_LIMIT_ENABLED", 1))
    # Only enable behind a proxy that sets X-Forwarded-For itself
    TRUST_FORWARDED_FOR = bool(data.get("TRUST_FORWARDED_FOR", 0))
    # None keeps page size unbounded
    PAGINATION_MAX_LIMIT = data.get("PAGINATION_MAX_LIMIT", None)
