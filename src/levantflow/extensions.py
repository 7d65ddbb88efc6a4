# src/levantflow/extensions.py

from flask import Flask
from flask_compress import Compress
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# --- Flask Extensions ---
# Stateless extensions are instantiated here and initialized in the app
# factory with init_app(app).

cors = CORS()
compress = Compress()


def make_limiter(app: Flask) -> Limiter:
    """
    Build a rate limiter bound to a single application.

    The quota is applied to all routes collectively, and the counters live
    in this instance's storage rather than a module-level one.
    """
    window_seconds = max(app.config["RATELIMIT_WINDOW_MS"] // 1000, 1)
    limiter = Limiter(
        key_func=get_remote_address,
        application_limits=[f"{app.config['RATELIMIT_MAX']} per {window_seconds} second"],
        strategy=app.config["RATELIMIT_STRATEGY"],
        storage_uri=app.config["RATELIMIT_STORAGE_URI"],
        headers_enabled=app.config["RATELIMIT_HEADERS_ENABLED"],
    )
    limiter.init_app(app)
    return limiter
