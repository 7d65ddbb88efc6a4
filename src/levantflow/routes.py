# src/levantflow/routes.py

import os
import http

from flask import Blueprint, abort, current_app, jsonify

from .metrics import (
    get_host_identity,
    get_process_memory,
    get_process_memory_mb,
    get_system_metrics,
    isoformat,
    runtime_version,
)
from .schemas import (
    FirebaseStatus,
    HealthInfo,
    MemoryStats,
    ProcessInfo,
    ProcessMemory,
    RateLimitInfo,
    ServerInfo,
    ServiceInfo,
    SystemInfo,
)
from .state import ServiceState, get_state

# --- Blueprint Setup ---
status_bp = Blueprint("status", __name__)


def build_service_info(state: ServiceState, config) -> ServiceInfo:
    identity = get_host_identity()
    return ServiceInfo(
        message=f"Welcome to {config['SERVICE_NAME']}",
        timestamp=isoformat(),
        server=ServerInfo(
            uptime_seconds=state.uptime_seconds,
            start_time=isoformat(state.start_time),
            memory=MemoryStats(**get_process_memory()),
            **identity,
        ),
        environment=config["ENVIRONMENT"],
        rate_limit=RateLimitInfo(
            window_ms=config["RATELIMIT_WINDOW_MS"],
            max=config["RATELIMIT_MAX"],
        ),
        firebase=FirebaseStatus(
            initialized=state.firebase_initialized,
            project_id=config.get("FIREBASE_PROJECT_ID"),
        ),
    )


def build_health_info(state: ServiceState) -> HealthInfo:
    return HealthInfo(
        uptime_seconds=state.uptime_seconds,
        timestamp=isoformat(),
        system=SystemInfo(**get_system_metrics()),
        process=ProcessInfo(
            memory=ProcessMemory(**get_process_memory_mb()),
            pid=os.getpid(),
            runtime_version=runtime_version(),
        ),
        firebase=FirebaseStatus(initialized=state.firebase_initialized),
    )


# --- Routes ---

@status_bp.route("/", methods=["GET"])
def service_info():
    """Returns service identity, runtime and rate-limit metadata."""
    info = build_service_info(get_state(), current_app.config)
    return jsonify(info.to_dict()), http.HTTPStatus.OK


@status_bp.route("/health", methods=["GET"])
def health():
    """Returns liveness plus host and process resource usage."""
    info = build_health_info(get_state())
    return jsonify(info.to_dict()), http.HTTPStatus.OK


# Unmatched paths and methods are routed here so they pass through the same
# request stages (rate limiting included) before the 404 handler answers.
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@status_bp.route("/", methods=["POST", "PUT", "PATCH", "DELETE"], provide_automatic_options=False)
@status_bp.route("/<path:path>", methods=FALLBACK_METHODS)
def route_fallback(path=None):
    abort(http.HTTPStatus.NOT_FOUND)
