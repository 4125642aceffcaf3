"""Response models."""

from typing import Literal

from pydantic import BaseModel, Field

RUNNING_MESSAGE = "PHP API is running"


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok"] = Field(default="ok", description="Service health status")
    version: str = Field(description="Deployed release identifier")
    timestamp: str = Field(description="ISO-8601 time the response was built")


class StatusResponse(BaseModel):
    """Body returned for every path other than /health."""

    message: Literal["PHP API is running"] = Field(default=RUNNING_MESSAGE)
    version: str = Field(description="Deployed release identifier")


class ErrorResponse(BaseModel):
    """Error body; never includes filesystem paths."""

    error: str
    message: str
