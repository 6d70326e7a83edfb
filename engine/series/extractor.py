"""
Row-to-series extraction: turns one grouped raw row into an unnamed series.

Only the first value column supplies point values; further value columns
contribute to the series name but not to its points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

from config import TIME_COLUMN_INDEX, VALUE_COLUMN_INDEX
from engine.exceptions import StructuralMismatch
from engine.series.decoder import decode_timestamp, decode_value
from engine.series.models import Point, RawRow, Series


def extract_series(row: RawRow, name: str = "") -> Series:
    width = len(row.columns)
    if width <= VALUE_COLUMN_INDEX:
        raise StructuralMismatch(row.name, expected=VALUE_COLUMN_INDEX + 1, actual=width)

    points: List[Point] = []
    for i, scalars in enumerate(row.values):
        if len(scalars) != width:
            raise StructuralMismatch(row.name, expected=width, actual=len(scalars), value_index=i)
        points.append(Point(
            time=decode_timestamp(scalars[TIME_COLUMN_INDEX], row_name=row.name, value_index=i),
            value=decode_value(
                scalars[VALUE_COLUMN_INDEX],
                row_name=row.name,
                value_index=i,
                column_index=VALUE_COLUMN_INDEX,
            ),
        ))

    return Series(name=name, tags=dict(row.tags), points=tuple(points))
