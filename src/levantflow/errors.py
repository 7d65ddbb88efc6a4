# src/levantflow/errors.py

import http
import logging

from flask import Flask, Response, current_app, jsonify
from werkzeug.exceptions import HTTPException

from .metrics import isoformat

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
INTERNAL_ERROR = "Something went wrong!"


def route_not_found(error):
    return jsonify(message=ROUTE_NOT_FOUND, timestamp=isoformat()), http.HTTPStatus.NOT_FOUND


def rate_limit_exceeded(error):
    logger.warning(f"Rate limit exceeded: {error.description}")
    return Response(
        current_app.config["RATELIMIT_MESSAGE"],
        status=current_app.config["RATELIMIT_STATUS_CODE"],
        mimetype="text/plain",
    )


def http_error(error: HTTPException):
    return jsonify(message=error.description, timestamp=isoformat()), error.code


def unhandled_exception(error: Exception):
    logger.exception(f"Unhandled exception: {error}")
    body = {"message": INTERNAL_ERROR}
    if current_app.config.get("EXPOSE_ERROR_DETAILS"):
        body["error"] = str(error) or error.__class__.__name__
    return jsonify(body), http.HTTPStatus.INTERNAL_SERVER_ERROR


def register_error_handlers(app: Flask) -> None:
    """
    Register the central error handlers.

    Unknown paths and unsupported methods share the route-not-found body;
    any other exception escaping a view becomes a 500.
    """
    app.register_error_handler(http.HTTPStatus.NOT_FOUND, route_not_found)
    app.register_error_handler(http.HTTPStatus.METHOD_NOT_ALLOWED, route_not_found)
    app.register_error_handler(http.HTTPStatus.TOO_MANY_REQUESTS, rate_limit_exceeded)
    app.register_error_handler(HTTPException, http_error)
    app.register_error_handler(Exception, unhandled_exception)
