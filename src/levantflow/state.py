# src/levantflow/state.py

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from flask import Flask, current_app

EXTENSION_KEY = "levantflow"


@dataclass(frozen=True)
class ServiceState:
    """
    Process-scoped state shared by the route handlers.

    Created once by the app factory; the start time is never changed
    afterwards.
    """
    firebase_app: Optional[Any] = None
    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _started: float = field(default_factory=time.monotonic, repr=False)

    @property
    def uptime_seconds(self) -> float:
        return time.monotonic() - self._started

    @property
    def firebase_initialized(self) -> bool:
        return self.firebase_app is not None


def attach_state(app: Flask, state: ServiceState) -> None:
    app.extensions[EXTENSION_KEY] = state


def get_state() -> ServiceState:
    return current_app.extensions[EXTENSION_KEY]
