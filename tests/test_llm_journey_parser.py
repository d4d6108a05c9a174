"""Tests for the LLM-backed journey parser."""

import asyncio
import json
from datetime import time
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from uk_departures.adapters.nl_parser import AiProvider, LlmJourneyParser, provider_from_name
from uk_departures.adapters.nl_parser.llm_journey_parser import (
    LLM_CONFIDENCE,
    parse_model_reply,
    strip_code_fences,
)
from uk_departures.domain.models import ErrorDetails, ErrorKind, JourneyQuery

REPLY = {
    "departureStation": "Paddington",
    "destinationStation": "Bristol",
    "preferredDepartureTime": "15:00",
    "preferredArrivalTime": None,
    "isDeparture": True,
    "journeyDate": "2026-03-01",
    "notes": None,
}


def _completion(content: str) -> dict[str, Any]:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _mock_session(status: int = 200, data: Any = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=data)
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.post = MagicMock(return_value=context)
    return session


def test_strip_code_fences() -> None:
    """Given JSON wrapped in markdown fences, when stripping, then only the JSON is left."""
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'


def test_parse_model_reply_sets_confidence() -> None:
    """Given a valid reply, when parsing, then a JourneyQuery with the model confidence is returned."""
    result = parse_model_reply(json.dumps(REPLY))

    assert isinstance(result, JourneyQuery)
    assert result.departure_station == "Paddington"
    assert result.preferred_departure_time == time(15, 0)
    assert result.confidence == LLM_CONFIDENCE


@pytest.mark.parametrize(
    "extra",
    [{"confidence": 95}, {"journeyDate": "today"}, {"confidence": "high", "journeyDate": None}],
)
def test_parse_model_reply_ignores_confidence_and_date(extra: dict[str, Any]) -> None:
    """Given a reply with an odd confidence or date, when parsing, then the query is still usable."""
    result = parse_model_reply(json.dumps({**REPLY, **extra}))

    assert isinstance(result, JourneyQuery)
    assert result.is_valid
    assert result.confidence == LLM_CONFIDENCE


@pytest.mark.parametrize(
    ("direction", "expected"),
    [("departures", True), ("arrivals", False), ("false", False), ("maybe", True)],
)
def test_parse_model_reply_accepts_text_direction(direction: str, expected: bool) -> None:
    """Given isDeparture as text, when parsing, then it maps to a direction instead of failing."""
    result = parse_model_reply(json.dumps({**REPLY, "isDeparture": direction}))

    assert isinstance(result, JourneyQuery)
    assert result.is_departure is expected


@pytest.mark.parametrize("content", ["I am not sure what you mean.", "[1, 2]", ""])
def test_parse_model_reply_rejects_non_object(content: str) -> None:
    """Given a reply that is not a JSON object, when parsing, then a malformed-output error is returned."""
    result = parse_model_reply(content)

    assert isinstance(result, ErrorDetails)
    assert result.kind == ErrorKind.MALFORMED_PARSER_OUTPUT


def test_provider_from_name() -> None:
    """Given provider names, when looking them up, then unknown or missing names default to Groq."""
    assert provider_from_name("openrouter") == AiProvider.OPENROUTER
    assert provider_from_name("GROQ") == AiProvider.GROQ
    assert provider_from_name(None) == AiProvider.GROQ
    assert provider_from_name("something") == AiProvider.GROQ


def test_parser_without_key_is_disabled() -> None:
    """Given no API key, when checking, then the parser is disabled."""
    assert LlmJourneyParser(MagicMock(), None).is_enabled is False
    assert LlmJourneyParser(None, "key").is_enabled is False
    assert LlmJourneyParser(MagicMock(), "key").is_enabled is True


def test_model_defaults_to_provider_default() -> None:
    """Given no model override, when creating the parser, then the provider's default model is used."""
    parser = LlmJourneyParser(MagicMock(), "key", provider=AiProvider.OPENROUTER)

    assert parser.model == AiProvider.OPENROUTER.default_model
    assert LlmJourneyParser(MagicMock(), "key", model="custom").model == "custom"


@pytest.mark.asyncio
async def test_disabled_parser_returns_none_without_calling() -> None:
    """Given a disabled parser, when parsing, then None is returned and no request is made."""
    session = _mock_session()
    parser = LlmJourneyParser(session, None)

    assert await parser.parse_query("trains to Bristol") is None
    session.post.assert_not_called()


@pytest.mark.asyncio
async def test_parse_query_posts_chat_completion() -> None:
    """Given a successful completion, when parsing, then the provider endpoint is called and the query returned."""
    session = _mock_session(data=_completion("```json\n" + json.dumps(REPLY) + "\n```"))
    parser = LlmJourneyParser(session, "key-123", provider=AiProvider.GROQ)

    query = await parser.parse_query("Trains from Paddington to Bristol around 3pm")

    assert query is not None
    assert query.destination_station == "Bristol"
    args, kwargs = session.post.call_args
    assert args[0] == "https://api.groq.com/openai/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer key-123"
    payload = kwargs["json"]
    assert payload["model"] == AiProvider.GROQ.default_model
    assert payload["temperature"] == 0
    assert payload["messages"][0]["role"] == "system"
    assert payload["messages"][1] == {
        "role": "user",
        "content": "Trains from Paddington to Bristol around 3pm",
    }


@pytest.mark.asyncio
async def test_parse_query_returns_none_on_malformed_reply(caplog: pytest.LogCaptureFixture) -> None:
    """Given a reply that is not JSON, when parsing, then None is returned and a warning is logged."""
    session = _mock_session(data=_completion("Sorry, I can't help with that."))
    parser = LlmJourneyParser(session, "key")

    assert await parser.parse_query("hello") is None
    assert "Could not parse model reply" in caplog.text


@pytest.mark.asyncio
async def test_parse_query_returns_none_on_http_error() -> None:
    """Given a 429 response, when parsing, then None is returned."""
    session = _mock_session(status=429, text="rate limited")
    parser = LlmJourneyParser(session, "key")

    assert await parser.parse_query("trains to Leeds") is None


@pytest.mark.asyncio
async def test_parse_query_returns_none_on_timeout() -> None:
    """Given a request timeout, when parsing, then None is returned."""
    session = MagicMock()
    session.post = MagicMock(side_effect=asyncio.TimeoutError())
    parser = LlmJourneyParser(session, "key")

    assert await parser.parse_query("trains to Leeds") is None


@pytest.mark.asyncio
async def test_parse_query_returns_none_without_choices() -> None:
    """Given a completion without choices, when parsing, then None is returned."""
    session = _mock_session(data={"choices": []})
    parser = LlmJourneyParser(session, "key")

    assert await parser.parse_query("trains to Leeds") is None
