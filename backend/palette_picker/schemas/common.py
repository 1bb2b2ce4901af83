"""
Palette Picker Backend — Shared Response Schemas
==================================================

What:  Error and health payloads shared by every router.

Error format:
    All failures answer with a single "error" key. For client errors it is
    a human-readable string; for server errors it describes the underlying
    exception:

        {"error": "Could not find project with id 999999"}
        {"error": {"name": "OperationalError", "message": "..."}}
"""

from typing import Dict, Union

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: Union[str, Dict[str, str]] = Field(
        description="Error message, or the name/message of the underlying error"
    )


class HealthResponse(BaseModel):
    """
    Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    environment: str = Field(description="Active environment mode")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
