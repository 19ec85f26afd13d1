import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Storefront builder
    BUILDER_HISTORY_LIMIT = int(os.getenv("BUILDER_HISTORY_LIMIT", "50"))
    BUILDER_AUTOSAVE_DELAY = float(os.getenv("BUILDER_AUTOSAVE_DELAY", "2.0"))
    BUILDER_AUTOSAVE_ENABLED = _env_bool("BUILDER_AUTOSAVE_ENABLED", True)
    BUILDER_SESSION_IDLE_TIMEOUT = float(os.getenv("BUILDER_SESSION_IDLE_TIMEOUT", "1800"))

    LOG_ENVIRONMENT = "prod"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///storefront-dev.db")
    LOG_ENVIRONMENT = "dev"


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-secret-key-with-enough-length-for-hs256"
    BUILDER_AUTOSAVE_ENABLED = False
    LOG_ENVIRONMENT = "test"


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
