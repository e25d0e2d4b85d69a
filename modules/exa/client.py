"""Exa API client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pydantic
import structlog

from modules.exa.errors import TransportError, UpstreamError
from modules.exa.models import ContentsResponse, FindSimilarResponse, SearchResponse

logger = structlog.get_logger()

EXA_API_BASE = "https://api.exa.ai"
USER_AGENT = "exa-tool-module/1.1.0"

SEARCH_ENDPOINT = "/search"
CONTENTS_ENDPOINT = "/contents"
FIND_SIMILAR_ENDPOINT = "/findSimilar"


def _error_message(status: int, body: str) -> tuple[str, str | None]:
    """Pull the provider's message (and request id) out of an error body.

    Falls back to the raw body text when it is not JSON or has no message.
    """
    message = f"Exa API error ({status}): {body}"
    request_id = None
    try:
        data = json.loads(body)
    except ValueError:
        return message, None

    if isinstance(data, dict):
        provided = data.get("message") or data.get("error")
        if isinstance(provided, str) and provided:
            message = provided
        if isinstance(data.get("requestId"), str):
            request_id = data["requestId"]
    return message, request_id


class ExaClient:
    """Async client for the Exa search API.

    One POST per call, no retries. Timeouts are off unless ``timeout`` is
    given; cancelling the awaiting task abandons the in-flight request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = EXA_API_BASE,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def search(self, body: dict[str, Any]) -> SearchResponse:
        data = await self._post(SEARCH_ENDPOINT, body)
        return self._parse(SearchResponse, data)

    async def get_contents(self, body: dict[str, Any]) -> ContentsResponse:
        data = await self._post(CONTENTS_ENDPOINT, body)
        return self._parse(ContentsResponse, data)

    async def find_similar(self, body: dict[str, Any]) -> FindSimilarResponse:
        data = await self._post(FIND_SIMILAR_ENDPOINT, body)
        return self._parse(FindSimilarResponse, data)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "User-Agent": USER_AGENT,
        }

    async def _post(self, endpoint: str, body: dict[str, Any]) -> dict:
        """POST a JSON body to an Exa endpoint and return the decoded JSON.

        Raises:
            UpstreamError: Non-2xx status, or a 2xx body that is not a JSON object.
            TransportError: The request never got a response.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("exa_request", endpoint=endpoint)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(url, json=body, headers=self._headers())
        except httpx.RequestError as e:
            detail = str(e) or type(e).__name__
            logger.error("exa_request_error", endpoint=endpoint, error=detail)
            raise TransportError(f"Network error: {detail}")

        if not resp.is_success:
            message, request_id = _error_message(resp.status_code, resp.text)
            logger.error(
                "exa_http_error",
                endpoint=endpoint,
                status=resp.status_code,
                body=resp.text,
                request_id=request_id,
            )
            raise UpstreamError(message, status_code=resp.status_code, request_id=request_id)

        try:
            data = resp.json()
        except ValueError:
            raise UpstreamError("Invalid JSON response", status_code=resp.status_code)
        if not isinstance(data, dict):
            raise UpstreamError("Unexpected response shape", status_code=resp.status_code)
        return data

    @staticmethod
    def _parse(model: type[pydantic.BaseModel], data: dict):
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error("exa_response_invalid", model=model.__name__, error=str(e))
            raise UpstreamError(
                "Unexpected response shape",
                request_id=data.get("requestId") if isinstance(data.get("requestId"), str) else None,
            )
