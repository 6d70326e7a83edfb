"""
Numeric decoding of loosely-typed response scalars.

A scalar is either a number (JSON number or its decimal text form) or the
null sentinel. Null decodes to ``None`` so a missing sample can never be
mistaken for a zero sample downstream.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from config import NULL_SENTINEL, TIME_COLUMN_INDEX
from engine.exceptions import MalformedScalar

_DECIMAL_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def decode_value(
    raw: Any,
    row_name: Optional[str] = None,
    value_index: Optional[int] = None,
    column_index: Optional[int] = None,
) -> Optional[float]:
    def _malformed(reason: str) -> MalformedScalar:
        return MalformedScalar(
            raw,
            reason=reason,
            row_name=row_name,
            value_index=value_index,
            column_index=column_index,
        )

    if raw is None:
        return None

    if isinstance(raw, bool):
        raise _malformed("booleans are not numeric samples")

    if isinstance(raw, str):
        if raw == NULL_SENTINEL:
            return None
        if not _DECIMAL_RE.fullmatch(raw):
            raise _malformed("not a decimal number or null")
    elif not isinstance(raw, (int, float)):
        raise _malformed(f"unsupported scalar type {type(raw).__name__}")

    try:
        number = float(raw)
    except OverflowError:
        raise _malformed("value is not finite") from None
    if not math.isfinite(number):
        raise _malformed("value is not finite")
    return number


def decode_timestamp(
    raw: Any,
    row_name: Optional[str] = None,
    value_index: Optional[int] = None,
) -> float:
    ts = decode_value(raw, row_name=row_name, value_index=value_index, column_index=TIME_COLUMN_INDEX)
    if ts is None:
        raise MalformedScalar(
            raw,
            reason="timestamp must not be null",
            row_name=row_name,
            value_index=value_index,
            column_index=TIME_COLUMN_INDEX,
        )
    return ts
