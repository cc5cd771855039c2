import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "supersecretkey")
    JWT_SECRET = os.getenv("JWT_SECRET", "default_secret")
    JWT_EXPIRES_IN_MINUTES = int(os.getenv("JWT_EXPIRES_IN_MINUTES", 60))

    MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/lostandfound_db")

    # Uploads are staged on disk before the image store picks them up
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join("tmp", "uploads"))
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_MB", 5)) * 1024 * 1024
    PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")
    IMAGE_MAX_SIZE = int(os.getenv("IMAGE_MAX_SIZE", 1200))

    LOG_DIR = os.getenv("LOG_DIR", "logs")
    ENABLE_SMTP_ALERTS = _env_flag("ENABLE_SMTP_ALERTS")

    RATELIMIT_ENABLED = _env_flag("RATELIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    LIMIT_DEFAULT_HOURLY = os.getenv("LIMIT_DEFAULT_HOURLY", "200 per hour")
    LIMIT_DEFAULT_SECONDLY = os.getenv("LIMIT_DEFAULT_SECONDLY", "10 per second")

    TESTING = False


class TestingConfig(Config):
    TESTING = True
    JWT_SECRET = "test_secret"
    MONGODB_URI = "mongodb://localhost:27017/lostandfound_test"
    RATELIMIT_ENABLED = False
    ENABLE_SMTP_ALERTS = False
