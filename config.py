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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./portal.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Tenant sessions
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_TTL_MINUTES = data.get("SESSION_TTL_MINUTES", 60 * 24 * 7)
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "portal_session")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))

    # Superadmin console
    SUPERADMIN_JWT_SECRET = data.get(
        "SUPERADMIN_JWT_SECRET", "dev-superadmin-secret-change-in-production"
    )
    SUPERADMIN_TOKEN_TTL_SECONDS = data.get("SUPERADMIN_TOKEN_TTL_SECONDS", 60 * 60 * 8)

    # Scheduled jobs
    CRON_SECRET_KEY = data.get("CRON_SECRET_KEY", "")
    DEMO_ORG_ID = data.get("DEMO_ORG_ID", None)
    DEMO_TTL_MINUTES = data.get("DEMO_TTL_MINUTES", 30)
    DEMO_BATCH_LIMIT = data.get("DEMO_BATCH_LIMIT", 200)
    REMINDER_BATCH_SIZE = data.get("REMINDER_BATCH_SIZE", 25)

    # Object storage (any S3-compatible endpoint)
    STORAGE_BUCKET = data.get("STORAGE_BUCKET", "case-documents")
    STORAGE_ENDPOINT = data.get("STORAGE_ENDPOINT", "")
    STORAGE_ACCESS_KEY = data.get("STORAGE_ACCESS_KEY", "")
    STORAGE_SECRET_KEY = data.get("STORAGE_SECRET_KEY", "")
    STORAGE_REGION = data.get("STORAGE_REGION", "us-east-1")
    SIGNED_URL_TTL_SECONDS = data.get("SIGNED_URL_TTL_SECONDS", 60 * 60)

    # Outbound integrations
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_FROM_EMAIL = data.get("RESEND_FROM_EMAIL", "")
    GOOGLE_DRIVE_ACCESS_TOKEN = data.get("GOOGLE_DRIVE_ACCESS_TOKEN", "")
    GOOGLE_DRIVE_ROOT_FOLDER_ID = data.get("GOOGLE_DRIVE_ROOT_FOLDER_ID", "")
    DOCUMENT_REVIEW_WEBHOOK_URL = data.get("DOCUMENT_REVIEW_WEBHOOK_URL", "")
    EXTERNAL_TIMEOUT_SECONDS = data.get("EXTERNAL_TIMEOUT_SECONDS", 10)

    # Uploads
    MAX_UPLOAD_BYTES = data.get("MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
    ALLOWED_UPLOAD_TYPES = data.get(
        "ALLOWED_UPLOAD_TYPES",
        ["application/pdf", "image/jpeg", "image/png", "image/webp"],
    )

    # action -> [limit, window_ms]
    RATE_LIMITS = data.get(
        "RATE_LIMITS",
        {
            "login": [10, 60 * 1000],
            "document_upload": [20, 60 * 1000],
            "message_send": [30, 60 * 1000],
            "document_review": [5, 60 * 1000],
        },
    )
    DEMO_DAILY_UPLOAD_LIMIT = data.get("DEMO_DAILY_UPLOAD_LIMIT", 10)
