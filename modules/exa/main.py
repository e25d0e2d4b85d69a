"""Exa module — FastAPI service."""

from __future__ import annotations

import structlog
from fastapi import Depends, FastAPI

from modules.exa.client import ExaClient
from modules.exa.manifest import MANIFEST
from modules.exa.tools import ExaTools, list_tools
from shared.auth import require_service_auth
from shared.config import get_settings
from shared.schemas.common import HealthResponse, ToolListing
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
)

logger = structlog.get_logger()
app = FastAPI(title="Exa Module", version="1.1.0")

tools: ExaTools | None = None


def build_tools() -> ExaTools:
    """Create the tool adapter from settings. Fails if EXA_API_KEY is unset."""
    settings = get_settings()
    client = ExaClient(
        api_key=settings.require_api_key(),
        base_url=settings.exa_api_base,
        timeout=settings.exa_timeout,
    )
    return ExaTools(client)


@app.on_event("startup")
async def startup():
    global tools
    tools = build_tools()
    logger.info("exa_module_ready", api_base=tools.client.base_url)


@app.get("/manifest", response_model=ModuleManifest)
async def manifest(_=Depends(require_service_auth)):
    """Return the module manifest."""
    return MANIFEST


@app.get("/tools", response_model=list[ToolListing])
async def tool_listing(_=Depends(require_service_auth)):
    """Return the tools with JSON Schema input definitions."""
    return [
        ToolListing(name=t.name, description=t.description, input_schema=t.input_schema())
        for t in list_tools()
    ]


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall, _=Depends(require_service_auth)):
    """Execute a tool call."""
    if tools is None:
        return ToolResult(tool_name=call.tool_name, success=False, error="Module not ready")

    return await tools.invoke(call.tool_name, dict(call.arguments))


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok")
