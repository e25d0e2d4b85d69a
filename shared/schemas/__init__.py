"""Pydantic schemas shared by the tool modules."""

from shared.schemas.common import HealthResponse, ToolListing
from shared.schemas.tools import (
    ModuleManifest,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    ToolResult,
)

__all__ = [
    "HealthResponse",
    "ModuleManifest",
    "ToolCall",
    "ToolDefinition",
    "ToolListing",
    "ToolParameter",
    "ToolResult",
]
