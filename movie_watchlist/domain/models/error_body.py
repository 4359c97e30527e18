import json
from typing import List, Union

from pydantic import BaseModel


class MessageErrorBody(BaseModel):
    message: str


class ErrorListBody(BaseModel):
    errors: List[str]


class UnparsableErrorBody(BaseModel):
    raw: str = ""


ErrorBody = Union[MessageErrorBody, ErrorListBody, UnparsableErrorBody]


def decode_error_body(content: bytes) -> ErrorBody:
    """Decode a backend error payload without trusting its shape.

    ``{"message": ...}`` wins over ``{"errors": [...]}``; anything else,
    including valid JSON of another shape, is unparsable.
    """
    text = content.decode("utf-8", errors="replace")
    try:
        data = json.loads(text)
    except ValueError:
        return UnparsableErrorBody(raw=text)

    if not isinstance(data, dict):
        return UnparsableErrorBody(raw=text)

    message = data.get("message")
    if isinstance(message, str) and message:
        return MessageErrorBody(message=message)

    errors = data.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], str) and errors[0]:
        return ErrorListBody(errors=[e for e in errors if isinstance(e, str)])

    return UnparsableErrorBody(raw=text)


def error_message(body: ErrorBody, fallback: str) -> str:
    if isinstance(body, MessageErrorBody):
        return body.message
    if isinstance(body, ErrorListBody):
        return body.errors[0]
    return fallback


def extract_error_message(content: bytes, fallback: str) -> str:
    return error_message(decode_error_body(content), fallback)
