"""
Shared HTTP helpers for data source connectors.

Numbers in query payloads are kept as their decimal text so the series
decoder sees exactly what the backend sent, the same way a streaming JSON
decoder configured to keep numbers as strings would.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

import httpx

from datasources.exceptions import DataSourceUnavailable, InvalidQuery, QueryTimeout


def loads_keep_numbers(text: str) -> Any:
    return json.loads(text, parse_int=str, parse_float=str, parse_constant=str)


async def _get(
    url: str,
    params: Optional[Dict[str, Any]],
    headers: Optional[Dict[str, str]],
    timeout: int,
    invalid_msg: str,
    timeout_msg: str,
    unavailable_msg: str,
) -> httpx.Response:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            return resp
    except httpx.HTTPStatusError as e:
        raise InvalidQuery(f"{invalid_msg} [{e.response.status_code}]: {e.response.text}") from e
    except httpx.TimeoutException as e:
        raise QueryTimeout(timeout_msg) from e
    except httpx.RequestError as e:
        raise DataSourceUnavailable(f"{unavailable_msg} {url}") from e


async def fetch_payload(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "query failed",
    timeout_msg: str = "query timed out",
    unavailable_msg: str = "Cannot reach data source at",
) -> Dict[str, Any]:
    resp = await _get(url, params, headers, timeout, invalid_msg, timeout_msg, unavailable_msg)
    try:
        payload = loads_keep_numbers(resp.text)
    except ValueError as e:
        raise InvalidQuery(f"{invalid_msg}: response body is not JSON") from e
    if not isinstance(payload, dict):
        raise InvalidQuery(f"{invalid_msg}: expected a JSON object, got {type(payload).__name__}")
    return payload


async def fetch_status(
    url: str,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "request failed",
    timeout_msg: str = "request timed out",
    unavailable_msg: str = "Cannot reach data source at",
) -> int:
    resp = await _get(url, None, headers, timeout, invalid_msg, timeout_msg, unavailable_msg)
    return resp.status_code
