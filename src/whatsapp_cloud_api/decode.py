"""
Body decoding for Graph API responses.

Graph answers with JSON for almost everything, with form-encoded pairs on the
OAuth token exchange endpoint and with a bare id on some creation endpoints.
All of them collapse into one dict here.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict
from urllib.parse import parse_qsl

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal: {name}")


def _parse_int(text: str) -> Any:
    # Past the interpreter's int digit limit, keep the literal as a string
    try:
        return int(text)
    except ValueError:
        return text


def try_parse_json(body: str) -> Any:
    """Parse JSON, returning None when the body is not valid JSON."""
    try:
        return json.loads(body, parse_constant=_reject_constant, parse_int=_parse_int)
    except (ValueError, RecursionError):
        return None


def parse_form_encoded(body: str) -> Dict[str, str]:
    """Parse application/x-www-form-urlencoded pairs. Last duplicate wins."""
    try:
        return dict(parse_qsl(body, keep_blank_values=True))
    except ValueError:
        return {}


def is_numeric(value: Any) -> bool:
    """True for numbers and numeric strings (bools are not numbers here)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def decode_body(body: str) -> Dict[Any, Any]:
    """
    Convert a raw Graph body into a dict.

    Never raises; anything that cannot be represented as a mapping
    becomes an empty dict.
    """
    decoded = try_parse_json(body)

    if decoded is None:
        decoded = parse_form_encoded(body)
    elif isinstance(decoded, list):
        decoded = dict(enumerate(decoded))
    elif is_numeric(decoded):
        decoded = {"id": decoded}

    if not isinstance(decoded, dict):
        decoded = {}

    return decoded
