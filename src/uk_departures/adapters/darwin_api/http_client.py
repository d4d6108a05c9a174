"""HTTP client for the Live Departure Boards JSON API.

Every call returns either the decoded JSON object or an ErrorDetails. Failed
requests are logged and never retried.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from uk_departures.adapters.api_request_logger import log_api_request
from uk_departures.adapters.darwin_api.constants import API_KEY_HEADER
from uk_departures.domain.models.error_details import ErrorDetails, ErrorKind

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class DarwinHttpClient:
    """HTTP client for Live Departure Boards requests."""

    def __init__(
        self,
        session: "ClientSession | None",
        token: str | None,
        base_url: str,
        timeout_seconds: int = 30,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session used for all requests.
            token: Static API token sent with every request.
            base_url: Base URL of the JSON API, without a trailing slash.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self._token or "",
            "accept": "application/json",
        }

    async def _log_error_response(self, response: "ClientResponse", url: str) -> str:
        """Log error response details and return a short reason."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Live Departure Boards API returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )
        return f"API returned status {response.status}"

    async def _handle_response(
        self, response: "ClientResponse", url: str
    ) -> dict[str, Any] | ErrorDetails:
        if response.status != 200:
            reason = await self._log_error_response(response, url)
            return ErrorDetails(status_code=response.status, reason=reason)

        data = await response.json(content_type=None)
        if not isinstance(data, dict):
            logger.warning(f"Unexpected response shape from {url}: {type(data).__name__}")
            return ErrorDetails(status_code=response.status, reason="Unexpected response format")
        return data

    async def get_json(
        self, path: str, params: dict[str, str | int] | None = None
    ) -> dict[str, Any] | ErrorDetails:
        """GET a path below the base URL and decode the JSON object it returns."""
        if not self._session:
            return ErrorDetails(kind=ErrorKind.EXTERNAL_FAILURE, reason="No HTTP session available")
        if not self._token:
            return ErrorDetails(reason="No Live Departure Boards API token configured")

        url = f"{self._base_url}/{path}"
        headers = self._headers()
        log_api_request("GET", url, params=params, headers=headers)

        try:
            async with self._session.get(
                url, params=params, headers=headers, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error requesting {url}: {e}")
            return ErrorDetails(reason=f"Request failed: {e}")
