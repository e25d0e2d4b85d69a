"""Exa module tool implementations."""

from __future__ import annotations

from typing import Any

import structlog

from modules.exa.client import ExaClient
from modules.exa.errors import ExaToolError, UnknownToolError, render_error
from modules.exa.formatting import format_contents, format_search_results, format_similar_results
from modules.exa.manifest import MANIFEST
from modules.exa.payloads import build_contents_body, build_find_similar_body, build_search_body
from modules.exa.validation import check_one_of, validate_arguments
from shared.schemas.tools import ToolDefinition, ToolResult

logger = structlog.get_logger()


def list_tools() -> list[ToolDefinition]:
    """Return the tool catalog. Same objects, same order, on every call."""
    return MANIFEST.tools


def resolve_tool(tool_name: str) -> ToolDefinition:
    """Find a tool by qualified (``exa.search``) or bare (``search``) name.

    A dotted name must match exactly; other module prefixes are unknown.
    """
    for tool in MANIFEST.tools:
        if tool_name == tool.name:
            return tool
        if "." not in tool_name and tool_name == tool.name.split(".")[-1]:
            return tool
    raise UnknownToolError(tool_name)


class ExaTools:
    """Tool implementations backed by the Exa API.

    Stateless between calls: every invocation validates, builds, sends, and
    renders using only its own arguments.
    """

    def __init__(self, client: ExaClient):
        self.client = client
        self._handlers = {
            "search": self.search,
            "get_contents": self.get_contents,
            "find_similar": self.find_similar,
        }

    async def invoke(self, tool_name: str, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Run one tool call, turning every failure into an error result."""
        try:
            tool = resolve_tool(tool_name)
            handler = self._handlers[tool.name.split(".")[-1]]
            text = await handler(arguments or {})
        except ExaToolError as e:
            logger.warning(
                "tool_execution_error",
                tool=tool_name,
                error=e.message,
                error_type=type(e).__name__,
                status=e.status_code,
                request_id=e.request_id,
            )
            return ToolResult(tool_name=tool_name, success=False, error=render_error(tool_name, e))
        except Exception as e:
            logger.error("tool_execution_error", tool=tool_name, error=str(e), exc_info=True)
            return ToolResult(
                tool_name=tool_name,
                success=False,
                error=render_error(tool_name, ExaToolError(str(e) or type(e).__name__)),
            )

        return ToolResult(tool_name=tool_name, success=True, result=text)

    async def search(self, arguments: dict[str, Any]) -> str:
        """Neural or keyword web search."""
        args = self._validate("search", arguments)
        response = await self.client.search(build_search_body(args))
        return format_search_results(response, args["query"])

    async def get_contents(self, arguments: dict[str, Any]) -> str:
        """Full page text for Exa result ids or URLs."""
        args = self._validate("get_contents", arguments)
        response = await self.client.get_contents(build_contents_body(args))
        return format_contents(response)

    async def find_similar(self, arguments: dict[str, Any]) -> str:
        """Pages similar to a given URL."""
        args = self._validate("find_similar", arguments)
        response = await self.client.find_similar(build_find_similar_body(args))
        return format_similar_results(response, args["url"])

    @staticmethod
    def _validate(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        tool = resolve_tool(tool_name)
        args = validate_arguments(tool, arguments)
        check_one_of(tool, args)
        return args
