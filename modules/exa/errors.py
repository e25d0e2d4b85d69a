"""Error types raised while handling an Exa tool call."""

from __future__ import annotations


class ExaToolError(Exception):
    """Base error for a failed tool call.

    Carries enough context to render a diagnostic for the caller without
    exposing a stack trace.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.request_id = request_id

    def render(self) -> str:
        return self.message


class ValidationError(ExaToolError):
    """Arguments are missing, malformed, or conflicting."""


class UnknownToolError(ExaToolError):
    """The requested tool is not in the manifest."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ExaAPIError(ExaToolError):
    """The Exa API could not be reached or answered with an error."""

    def render(self) -> str:
        text = f"Exa API Error: {self.message}"
        if self.status_code:
            text += f" ({self.status_code})"
        return text


class UpstreamError(ExaAPIError):
    """Non-2xx (or unreadable) response from the Exa API."""


class TransportError(ExaAPIError):
    """Network, DNS, or timeout failure; there is no status code."""

    def __init__(self, message: str):
        super().__init__(message)


def render_error(tool_name: str, error: ExaToolError) -> str:
    """Render the single user-facing line for a failed call."""
    return f"❌ Error calling {tool_name}: {error.render()}"
