import os
import tempfile
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///postboard.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    # Seconds; the statement timeout applies to PostgreSQL only.
    DATABASE_CONNECT_TIMEOUT = float(os.getenv("DATABASE_CONNECT_TIMEOUT", "10"))
    DATABASE_STATEMENT_TIMEOUT = float(os.getenv("DATABASE_STATEMENT_TIMEOUT", "30"))

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret")
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        hours=int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES_HOURS", "24"))
    )

    # Mixed into every password before hashing.
    PASSWORD_PEPPER = os.getenv("PASSWORD_PEPPER", "CHAVE")

    MINIO_ENDPOINT = os.getenv("MINIO_ENDPOINT", "localhost:9000")
    MINIO_ACCESS_KEY = os.getenv("MINIO_ACCESS_KEY", "admin")
    MINIO_SECRET_KEY = os.getenv("MINIO_SECRET_KEY", "supersecret")
    MINIO_REGION = os.getenv("MINIO_REGION") or None
    MINIO_BUCKET = os.getenv("MINIO_BUCKET", "media")
    MINIO_SECURE = _env_bool("MINIO_SECURE", False)
    MINIO_CONNECT_TIMEOUT = float(os.getenv("MINIO_CONNECT_TIMEOUT", "5"))
    MINIO_READ_TIMEOUT = float(os.getenv("MINIO_READ_TIMEOUT", "20"))
    MINIO_HTTP_POOL_MAXSIZE = int(os.getenv("MINIO_HTTP_POOL_MAXSIZE", "32"))
    MINIO_AUTO_CREATE_BUCKET = _env_bool("MINIO_AUTO_CREATE_BUCKET", True)
    MEDIA_PUBLIC_BASE_URL = os.getenv(
        "MEDIA_PUBLIC_BASE_URL",
        f"http://127.0.0.1:9000/{MINIO_BUCKET}",
    )

    UPLOAD_STAGING_DIR = os.getenv(
        "UPLOAD_STAGING_DIR",
        os.path.join(tempfile.gettempdir(), "postboard-uploads"),
    )
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(10 * 1024 * 1024)))

    DEFAULT_PAGE_LIMIT = 10
    MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "50"))

    # Bearer tokens only, so a wildcard origin is safe here.
    _cors_origins_raw = os.getenv("CORS_ALLOWED_ORIGINS", "").strip()
    if _cors_origins_raw:
        CORS_ALLOWED_ORIGINS = [
            item.strip() for item in _cors_origins_raw.split(",") if item.strip()
        ]
    else:
        CORS_ALLOWED_ORIGINS = "*"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
