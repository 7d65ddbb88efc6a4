"""
Process and host metrics collection for the status endpoints.

All collectors read live values on every call; nothing is cached.
"""
import os
import sys
import socket
import logging
import platform
from datetime import datetime, timezone
from typing import Dict, List, Optional

import psutil

logger = logging.getLogger(__name__)

BYTES_PER_MB = 1024 * 1024


def isoformat(moment: Optional[datetime] = None) -> str:
    """
    Render a moment as an ISO-8601 UTC string with millisecond precision.

    Example: 2024-05-01T12:00:00.000Z
    """
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def runtime_version() -> str:
    return platform.python_version()


def get_process_memory() -> Dict[str, int]:
    """
    Memory counters of the current process, in bytes.

    Returns:
        dict: rss (resident set size) and vms (virtual memory size)
    """
    info = psutil.Process(os.getpid()).memory_info()
    return {"rss": info.rss, "vms": info.vms}


def get_process_memory_mb() -> Dict[str, float]:
    memory = get_process_memory()
    return {
        "used_mb": round(memory["rss"] / BYTES_PER_MB, 2),
        "total_mb": round(memory["vms"] / BYTES_PER_MB, 2),
    }


def get_load_average() -> List[float]:
    # Load averages (1, 5, 15 minutes); zeros where the platform has none
    try:
        return [float(value) for value in psutil.getloadavg()]
    except (AttributeError, OSError) as e:
        logger.debug(f"Load average unavailable: {e}")
        return [0.0, 0.0, 0.0]


def get_system_metrics() -> Dict[str, object]:
    """
    Collect host-level metrics using psutil.

    Returns:
        dict: load averages, total/free memory in bytes and logical CPU count
    """
    memory = psutil.virtual_memory()
    return {
        "load_average": get_load_average(),
        "total_memory_bytes": memory.total,
        "free_memory_bytes": memory.available,
        "cpu_count": psutil.cpu_count() or 0,
    }


def get_host_identity() -> Dict[str, str]:
    return {
        "runtime_version": runtime_version(),
        "platform": sys.platform,
        "hostname": socket.gethostname(),
    }
