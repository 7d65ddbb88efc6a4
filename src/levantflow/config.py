# src/levantflow/config.py

import os

from dotenv import load_dotenv

# Load environment variables from .env before any Config attribute is read.
load_dotenv()


class Config:
    """
    Unified configuration class, populated from the environment.
    """

    # --- General ---
    SERVICE_NAME = os.environ.get("SERVICE_NAME", "LevantFlow API")
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", 3000))

    # Reported environment falls back to "development"; error detail is only
    # exposed when the mode is explicitly set to it.
    ENVIRONMENT = os.environ.get("FLASK_ENV") or "development"
    EXPOSE_ERROR_DETAILS = os.environ.get("FLASK_ENV") == "development"

    # --- Logging ---
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    LOG_FILE_ENABLED = os.environ.get("LOG_FILE_ENABLED", "false").lower() == "true"
    LOG_FILE_PATH = os.environ.get("LOG_FILE_PATH", "app.log")

    # --- Request bodies ---
    MAX_CONTENT_LENGTH = 100 * 1024

    # --- Rate limiting ---
    RATELIMIT_ENABLED = True
    RATELIMIT_WINDOW_MS = int(os.environ.get("RATE_LIMIT_WINDOW_MS", 15 * 60 * 1000))
    RATELIMIT_MAX = int(os.environ.get("RATE_LIMIT_MAX", 100))
    RATELIMIT_MESSAGE = "Too many requests from this IP, please try again later."
    RATELIMIT_STATUS_CODE = 429
    RATELIMIT_STRATEGY = "fixed-window"
    RATELIMIT_STORAGE_URI = os.environ.get("RATE_LIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    RATELIMIT_HEADER_LIMIT = "RateLimit-Limit"
    RATELIMIT_HEADER_REMAINING = "RateLimit-Remaining"
    RATELIMIT_HEADER_RESET = "RateLimit-Reset"
    RATELIMIT_HEADER_RETRY_AFTER = "Retry-After"

    # --- Compression ---
    COMPRESS_ALGORITHM = "gzip"
    COMPRESS_MIN_SIZE = 1024

    # --- CORS Origins ---
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # --- Security headers ---
    SECURITY_HEADERS = {
        "Content-Security-Policy": (
            "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
            "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
            "object-src 'none';script-src 'self';script-src-attr 'none';"
            "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
        ),
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
        "Origin-Agent-Cluster": "?1",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-Content-Type-Options": "nosniff",
        "X-DNS-Prefetch-Control": "off",
        "X-Download-Options": "noopen",
        "X-Frame-Options": "DENY",
        "X-Permitted-Cross-Domain-Policies": "none",
        "X-XSS-Protection": "1; mode=block",
    }

    # --- Firebase Admin ---
    FIREBASE_CREDENTIAL_PATH = os.environ.get("FIREBASE_CREDENTIAL_PATH")
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID")
