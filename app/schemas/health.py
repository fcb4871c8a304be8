"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status plus the result of the Users store probe."""

    status: Literal["ok"] = "ok"
    service: str = Field(default="admin-panel-auth", description="Service name")
    environment: str = Field(description="APP_ENV the service runs under")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether SELECT 1 against the Users store succeeded",
    )
