import os
from datetime import timedelta

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _flag(name, default="false"):
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///rentdesk.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Configuration
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", "24")))

    # Lease expiration sweep (runs once at startup, then on this interval)
    LEASE_SWEEP_ENABLED = _flag("LEASE_SWEEP_ENABLED", "true")
    LEASE_SWEEP_INTERVAL_SECONDS = int(os.environ.get("LEASE_SWEEP_INTERVAL_SECONDS", "3600"))

    # Seed admin for `flask seed-admin`
    SU_PHONE = os.environ.get("SU_PHONE")
    SU_PASSWORD = os.environ.get("SU_PASSWORD")

    API_PREFIX = "/api"
    JSON_SORT_KEYS = False


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
    LEASE_SWEEP_ENABLED = False


class ProductionConfig(Config):
    SECRET_KEY = os.environ.get("SECRET_KEY")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)

    @classmethod
    def check(cls):
        # Secret key for sessions / JWT - REQUIRED
        if not cls.SECRET_KEY:
            raise ValueError("SECRET_KEY environment variable must be set")
        # Database connection - REQUIRED
        if not cls.SQLALCHEMY_DATABASE_URI:
            raise ValueError("DATABASE_URL environment variable must be set")
