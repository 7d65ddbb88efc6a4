# src/levantflow/schemas.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Service info (GET /) ---

class MemoryStats(CamelModel):
    rss: int
    vms: int


class ServerInfo(CamelModel):
    uptime_seconds: float
    start_time: str
    memory: MemoryStats
    runtime_version: str
    platform: str
    hostname: str


class RateLimitInfo(CamelModel):
    window_ms: int
    max: int


class FirebaseStatus(CamelModel):
    initialized: bool
    project_id: Optional[str] = None


class ServiceInfo(CamelModel):
    message: str
    status: str = "online"
    timestamp: str
    server: ServerInfo
    environment: str
    rate_limit: RateLimitInfo
    firebase: FirebaseStatus


# --- Health info (GET /health) ---

class SystemInfo(CamelModel):
    load_average: List[float] = Field(min_length=3, max_length=3)
    total_memory_bytes: int
    free_memory_bytes: int
    cpu_count: int


class ProcessMemory(CamelModel):
    used_mb: float = Field(alias="usedMB")
    total_mb: float = Field(alias="totalMB")


class ProcessInfo(CamelModel):
    memory: ProcessMemory
    pid: int
    runtime_version: str


class HealthInfo(CamelModel):
    status: str = "healthy"
    uptime_seconds: float
    timestamp: str
    system: SystemInfo
    process: ProcessInfo
    firebase: FirebaseStatus
