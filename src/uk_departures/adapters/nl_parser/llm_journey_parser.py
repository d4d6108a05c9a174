"""Journey parser adapter backed by an OpenAI-compatible chat completion API."""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from uk_departures.adapters.api_request_logger import log_api_request
from uk_departures.adapters.nl_parser.prompts import JOURNEY_SYSTEM_PROMPT
from uk_departures.adapters.nl_parser.providers import AiProvider
from uk_departures.domain.models.error_details import ErrorDetails, ErrorKind
from uk_departures.domain.models.journey_query import JourneyQuery
from uk_departures.domain.ports.journey_parser import JourneyParser

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

# Confidence assigned to any query the model produced
LLM_CONFIDENCE = 0.9

# Reply keys filled in locally instead of read from the model
IGNORED_REPLY_KEYS = ("confidence", "journeyDate", "journey_date")


def strip_code_fences(content: str) -> str:
    """Remove markdown code fences the model sometimes wraps JSON in."""
    text = content.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def parse_model_reply(content: str) -> JourneyQuery | ErrorDetails:
    """Validate the model's reply as a JourneyQuery.

    Confidence and journey date are never taken from the reply, so a bad
    value in either does not cost an otherwise usable query.
    """
    try:
        data = json.loads(strip_code_fences(content))
    except ValueError as e:
        return ErrorDetails(kind=ErrorKind.MALFORMED_PARSER_OUTPUT, reason=str(e))
    if not isinstance(data, dict):
        return ErrorDetails(
            kind=ErrorKind.MALFORMED_PARSER_OUTPUT, reason="Reply is not a JSON object"
        )

    for key in IGNORED_REPLY_KEYS:
        data.pop(key, None)
    try:
        return JourneyQuery.model_validate({**data, "confidence": LLM_CONFIDENCE})
    except ValidationError as e:
        return ErrorDetails(kind=ErrorKind.MALFORMED_PARSER_OUTPUT, reason=str(e))


class LlmJourneyParser(JourneyParser):
    """Parses free-text journey requests with an LLM.

    Disabled when no API key is configured; a disabled parser always
    returns None so callers fall back to manual station selection.
    """

    def __init__(
        self,
        session: "ClientSession | None",
        api_key: str | None,
        provider: AiProvider = AiProvider.GROQ,
        model: str | None = None,
        timeout_seconds: int = 20,
    ) -> None:
        """Initialize the parser.

        Args:
            session: aiohttp session used for requests.
            api_key: Provider API key; without one the parser is disabled.
            provider: Which OpenAI-compatible provider to call.
            model: Model name, defaults to the provider's default model.
            timeout_seconds: Total timeout per request.
        """
        self._session = session
        self._api_key = api_key
        self._provider = provider
        self._model = model or provider.default_model
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @property
    def is_enabled(self) -> bool:
        return bool(self._api_key) and self._session is not None

    @property
    def provider(self) -> AiProvider:
        return self._provider

    @property
    def model(self) -> str:
        return self._model

    def _build_payload(self, text: str) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": [
                {"role": "system", "content": JOURNEY_SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "temperature": 0,
        }

    @staticmethod
    def _extract_content(data: Any) -> str | None:
        """Pull the assistant message text out of a chat completion response."""
        if not isinstance(data, dict):
            return None
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return None
        message = choices[0].get("message") if isinstance(choices[0], dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        return content if isinstance(content, str) else None

    async def _complete(self, text: str) -> str | None:
        if not self._session:
            return None

        url = f"{self._provider.endpoint}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = self._build_payload(text)
        log_api_request("POST", url, headers=headers, payload=payload)

        try:
            async with self._session.post(
                url, json=payload, headers=headers, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    body = await response.text()
                    logger.warning(
                        f"{self._provider} returned status {response.status}: {body[:200]}"
                    )
                    return None
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error calling {self._provider}: {e}")
            return None

        return self._extract_content(data)

    async def parse_query(self, text: str) -> JourneyQuery | None:
        """Parse a natural-language journey request.

        Returns None if the parser is disabled, the call failed, or the
        model did not answer with valid JSON.
        """
        if not self.is_enabled:
            return None

        content = await self._complete(text)
        if content is None:
            return None

        result = parse_model_reply(content)
        if isinstance(result, ErrorDetails):
            logger.warning(f"Could not parse model reply as a journey query: {result.reason}")
            return None

        logger.debug(f"Parsed journey query: {result.model_dump(exclude_none=True)}")
        return result
