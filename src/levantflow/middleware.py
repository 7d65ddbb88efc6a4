"""
Request-processing stages applied to every request.

MIDDLEWARE lists the stages in the order they are installed. Each stage is
a function taking the Flask app and registering its hooks or extensions.
"""
import math
import time
import logging
from typing import Callable, Tuple

from flask import Flask, request

from .extensions import compress, cors, make_limiter

logger = logging.getLogger(__name__)


def security_headers(app: Flask) -> None:
    headers = dict(app.config["SECURITY_HEADERS"])

    @app.after_request
    def set_security_headers(response):
        for name, value in headers.items():
            response.headers[name] = value
        return response


def compression(app: Flask) -> None:
    compress.init_app(app)


def cross_origin(app: Flask) -> None:
    origins = app.config["CORS_ORIGINS"]
    cors.init_app(app, origins=origins, send_wildcard=origins == "*")


def json_body(app: Flask) -> None:
    @app.before_request
    def parse_json_body():
        # Parsed eagerly so malformed bodies fail before reaching a view.
        if request.is_json and request.content_length:
            request.get_json()


def rate_limiting(app: Flask) -> None:
    reset_header = app.config["RATELIMIT_HEADER_RESET"]
    window_seconds = max(app.config["RATELIMIT_WINDOW_MS"] // 1000, 1)

    # Registered before the limiter so it runs after the limiter has
    # injected its headers (after_request hooks run in reverse order).
    @app.after_request
    def reset_as_delta_seconds(response):
        try:
            reset_at = float(response.headers[reset_header])
        except (KeyError, ValueError):
            return response
        # Flask-Limiter sends the window end as an epoch timestamp.
        if reset_at > window_seconds:
            remaining = math.ceil(reset_at - time.time())
            response.headers[reset_header] = str(max(0, min(window_seconds, remaining)))
        return response

    limiter = make_limiter(app)

    @limiter.request_filter
    def is_cors_preflight():
        return request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers

    logger.info(
        f"Rate limiting: {app.config['RATELIMIT_MAX']} requests per "
        f"{app.config['RATELIMIT_WINDOW_MS']} ms per client."
    )


MIDDLEWARE: Tuple[Callable[[Flask], None], ...] = (
    security_headers,
    compression,
    cross_origin,
    json_body,
    rate_limiting,
)


def install_middleware(app: Flask) -> None:
    for stage in MIDDLEWARE:
        stage(app)
        logger.debug(f"Installed middleware stage: {stage.__name__}")
