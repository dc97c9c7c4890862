"""Mapping of API server responses to results.

Failures are never raised to the caller. A response maps to one of:

- success (200, 201, 304): the body, raw or decoded into a ParaObject
- nothing (404, 204): None, silently
- error (anything else): None, with the server's error message logged
"""

import json
import logging
from typing import Any

import httpx

from paraclient.domain.model import Pager, ParaObject

logger = logging.getLogger(__name__)

SUCCESS_CODES = frozenset({200, 201, 304})
SILENT_CODES = frozenset({404, 304, 204})


def deserialize(text: str | None) -> Any:
    """Decode a JSON document, returning None for empty or invalid input."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return None


def get_entity(
    response: httpx.Response | None, return_raw_json: bool = True
) -> str | ParaObject | None:
    """Map a response to its result.

    Args:
        response: Response to map, None if the request was never sent
        return_raw_json: Return the body text instead of a ParaObject

    Returns:
        Body text or ParaObject on success, None otherwise
    """
    if response is None:
        return None

    status = response.status_code
    if status in SUCCESS_CODES:
        if return_raw_json:
            return response.text
        data = deserialize(response.text)
        return ParaObject.from_dict(data) if isinstance(data, dict) else None

    if status not in SILENT_CODES:
        error = deserialize(response.text)
        if isinstance(error, dict) and "code" in error:
            message = error.get("message") or "error"
            logger.error(f"{message} - {error['code']}")
        else:
            logger.error(f"{status} - {response.reason_phrase}")
    return None


def get_items_from_list(result: Any) -> list[ParaObject]:
    """Decode a JSON array (or its text) of objects into ParaObjects."""
    if isinstance(result, str):
        result = deserialize(result)
    if not isinstance(result, list):
        return []
    return [ParaObject.from_dict(item) for item in result if isinstance(item, dict)]


def get_items(
    result: Any, at: str = "items", pager: Pager | None = None
) -> list[ParaObject]:
    """Decode the objects of a search envelope such as ``{"items": [...]}``.

    The envelope's ``totalHits`` and ``lastKey`` are copied to the pager.

    Args:
        result: Envelope, as text or decoded mapping
        at: Key of the array within the envelope
        pager: Pager receiving count and cursor

    Returns:
        Objects found under ``at``, empty when missing
    """
    if isinstance(result, str):
        result = deserialize(result)
    if not isinstance(result, dict):
        return []

    if pager is not None:
        if result.get("totalHits") is not None:
            pager.count = int(result["totalHits"])
        if result.get("lastKey") is not None:
            pager.last_key = str(result["lastKey"])

    return get_items_from_list(result.get(at))


def parse_bool(value: str | None) -> bool:
    """Interpret a plain ``true``/``false`` response body."""
    return value is not None and value.strip().strip('"').lower() == "true"
