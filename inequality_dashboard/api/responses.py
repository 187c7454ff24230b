"""
Response formatting for the Lambda handlers.

Builds API Gateway proxy responses with CORS headers and JSON bodies that
never contain NaN or Infinity.
"""

import json
import math
from typing import Any


def clean_nan_values(data: Any) -> Any:
    """Recursively replace NaN/Inf floats with None."""
    if isinstance(data, dict):
        return {k: clean_nan_values(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [clean_nan_values(item) for item in data]
    if isinstance(data, float) and (math.isnan(data) or math.isinf(data)):
        return None
    return data


def cors_headers() -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }


def json_response(
    status_code: int, body: Any, headers: dict[str, str] | None = None
) -> dict[str, Any]:
    """
    Build an API Gateway proxy response.

    Args:
        status_code: HTTP status code
        body: JSON-serializable payload
        headers: Extra headers merged over the CORS defaults

    Returns:
        Dict with statusCode, headers and a JSON string body
    """
    return {
        "statusCode": status_code,
        "headers": {**cors_headers(), **(headers or {})},
        "body": json.dumps(clean_nan_values(body), default=str, allow_nan=False),
    }


def query_params(event: dict | None) -> dict[str, str]:
    """Query string parameters of an API Gateway event (None becomes empty)."""
    if not event:
        return {}
    return event.get("queryStringParameters") or {}
