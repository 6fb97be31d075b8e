"""Helpers for API Gateway HTTP API (payload v2) proxy events."""

import base64
import binascii
import json
from datetime import date
from typing import Any, Dict, Iterable, Optional, Union

from pydantic import BaseModel

from utils.error_handling import ValidationError

JSON_HEADERS = {"Content-Type": "application/json"}


def json_response(status: int, body: Union[BaseModel, Iterable[BaseModel], Dict[str, Any]]) -> Dict:
    """Format a JSON API Gateway HTTP API response."""
    if isinstance(body, BaseModel):
        payload = body.model_dump_json()
    elif isinstance(body, dict):
        payload = json.dumps(body)
    else:
        payload = json.dumps([item.model_dump(mode="json") for item in body])
    return {"statusCode": status, "headers": JSON_HEADERS, "body": payload}


def empty_response(status: int = 204) -> Dict:
    return {"statusCode": status, "headers": {}, "body": ""}


def json_body(event: Dict) -> Dict[str, Any]:
    """Decode the request body; a missing body reads as an empty object."""
    raw = event.get("body")
    if not raw:
        return {}
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        payload = json.loads(raw)
    except (ValueError, binascii.Error):
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def query_params(event: Dict) -> Dict[str, str]:
    return event.get("queryStringParameters") or {}


def path_param(event: Dict, name: str = "id") -> str:
    return (event.get("pathParameters") or {}).get(name, "")


def optional_str(params: Dict[str, str], name: str) -> Optional[str]:
    """Empty-string filters mean no filter."""
    return params.get(name) or None


def lenient_int(params: Dict[str, str], name: str) -> Optional[int]:
    """Pagination values that are not non-negative integers are ignored."""
    try:
        value = int(params.get(name, ""))
    except ValueError:
        return None
    return value if value >= 0 else None


def lenient_date(params: Dict[str, str], name: str) -> Optional[date]:
    """Unparsable date filters are ignored."""
    try:
        return date.fromisoformat(params.get(name, ""))
    except ValueError:
        return None


def lenient_bool(params: Dict[str, str], name: str) -> Optional[bool]:
    """Only the literal strings "true" and "false" filter."""
    value = params.get(name)
    if value == "true":
        return True
    if value == "false":
        return False
    return None
