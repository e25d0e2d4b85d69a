"""Common schemas used across services."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Standard health check response."""

    status: str = "ok"


class ToolListing(BaseModel):
    """A tool as advertised to function-calling hosts."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: dict = Field(alias="inputSchema")
