"""Opt-in logging of outgoing Darwin and LLM requests (UKD_LOG_REQUESTS=true)."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REQUEST_LOG_ENV = "UKD_LOG_REQUESTS"
REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "x-apikey", "x-api-key"})


def should_log_requests() -> bool:
    return os.getenv(REQUEST_LOG_ENV, "").lower() == "true"


def request_line(method: str, url: str, params: dict[str, Any] | None = None) -> str:
    """Method and URL, with query parameters sorted by name."""
    if params:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{urlencode(sorted(params.items()))}"
    return f"{method} {url}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def summarize_payload(payload: Any) -> str:
    """Chat completions are reduced to model and message count so queries stay out of logs."""
    if isinstance(payload, dict) and "messages" in payload:
        return f"model={payload.get('model')} messages={len(payload['messages'])}"
    if isinstance(payload, dict):
        return json.dumps(payload, sort_keys=True, default=str)
    return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log one outgoing request as a single line when request logging is enabled."""
    if not should_log_requests():
        return

    parts = [request_line(method, url, params)]
    if headers:
        parts.append(f"headers={json.dumps(redact_headers(headers), sort_keys=True)}")
    if payload is not None:
        parts.append(f"payload={summarize_payload(payload)}")

    logger.info("API request: " + " ".join(parts))
