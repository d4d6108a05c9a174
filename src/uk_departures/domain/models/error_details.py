"""Error details domain model."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class ErrorKind(StrEnum):
    """Kinds of recoverable failure surfaced to the caller."""

    EXTERNAL_FAILURE = "external_failure"
    MALFORMED_PARSER_OUTPUT = "malformed_parser_output"


class ErrorDetails(BaseModel):
    """Details about a failure, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = ErrorKind.EXTERNAL_FAILURE
    status_code: int | None = None
    reason: str
