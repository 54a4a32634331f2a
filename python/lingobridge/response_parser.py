"""
Decoding of the inference backend's response body.

The hosted model answers with one of three shapes depending on the model and
pipeline: a list of result objects, a single result object, or a bare string.
The body is first classified into an explicit variant, then text is extracted
from it in a fixed order of preference.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

import httpx

from lingobridge.errors import EmptyResultError

TEXT_FIELDS = ("translation_text", "generated_text")


@dataclass(frozen=True)
class Sequence:
    items: List[Any]


@dataclass(frozen=True)
class Single:
    fields: Dict[str, Any]


@dataclass(frozen=True)
class Raw:
    text: str


BackendPayload = Union[Sequence, Single, Raw]


def decode_payload(data: Any) -> Optional[BackendPayload]:
    """Classify already-parsed JSON. Returns None for shapes we cannot use."""
    if isinstance(data, list):
        return Sequence(items=data)
    if isinstance(data, dict):
        return Single(fields=data)
    if isinstance(data, str):
        return Raw(text=data)
    return None


def decode_response(response: httpx.Response) -> Optional[BackendPayload]:
    """Parse the body as JSON when possible, otherwise keep it as raw text."""
    try:
        data = response.json()
    except ValueError:
        return Raw(text=response.text)
    return decode_payload(data)


def _text_from_fields(fields: Dict[str, Any]) -> str:
    for key in TEXT_FIELDS:
        value = fields.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def extract_text(payload: Optional[BackendPayload]) -> str:
    """
    Pull the translated string out of a decoded payload.

    Preference: `translation_text`, then `generated_text`, then the raw
    string. Only the first element of a sequence is looked at.

    Raises:
        EmptyResultError: nothing non-empty could be extracted.
    """
    text = ""
    if isinstance(payload, Sequence):
        first = payload.items[0] if payload.items else None
        if isinstance(first, dict):
            text = _text_from_fields(first)
    elif isinstance(payload, Single):
        text = _text_from_fields(payload.fields)
    elif isinstance(payload, Raw):
        text = payload.text

    if not text or not text.strip():
        raise EmptyResultError()
    return text
