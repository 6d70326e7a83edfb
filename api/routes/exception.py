"""
Centralized exception handling decorator for API route functions.

The :func:`handle_exceptions` decorator wraps an async endpoint handler and
translates uncaught exceptions into :class:`fastapi.HTTPException` responses:

* ``HTTPException`` is re-raised untouched.
* :class:`engine.exceptions.ResponseParseError` (malformed scalars, arity
  mismatches) becomes ``422``.
* :class:`datasources.exceptions.DataSourceError` (backend unreachable, timed
  out, statement errors) becomes ``502``.
* Anything else becomes ``500`` with the exception message as detail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar, cast

from fastapi import HTTPException

from datasources.exceptions import DataSourceError
from engine.exceptions import ResponseParseError

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def status_for(exc: Exception) -> int:
    if isinstance(exc, ResponseParseError):
        return 422
    if isinstance(exc, DataSourceError):
        return 502
    return 500


def handle_exceptions(func: F) -> F:
    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            code = status_for(exc)
            if code == 500:
                log.exception("%s failed", func.__name__)
            raise HTTPException(status_code=code, detail=str(exc)) from exc

    return cast(F, wrapper)
