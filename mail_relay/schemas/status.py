"""Schemas for the operational status endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    environment: str


class LogsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    sendgrid_configured: bool = Field(..., alias="sendgridConfigured")
    timestamp: str


__all__ = ["HealthResponse", "LogsResponse"]
