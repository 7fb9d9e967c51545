# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ── System Schemas ──

class Health(str, Enum):
    HEALTHY = "Healthy"
    SICK = "Sick"


class StatusResponse(BaseModel):
    health: Health


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None
    request_id: Optional[str] = None


# ── Alert Schemas ──

class CallResult(BaseModel):
    """One call placed by Twilio, as reported back by its API."""
    to: str
    sid: str
    status: str


class AlertResult(BaseModel):
    calls: list[CallResult] = Field(default_factory=list)
