"""Shared response bodies: the {message} envelope and the health report."""

from typing import Literal

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Body of every non-list response, including errors."""

    message: str = Field(..., description="Human-readable result")


class HealthResponse(BaseModel):
    """GET /health: process is up, plus whether the store answers."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV of the running process")
    database: Literal["connected", "disconnected"]
