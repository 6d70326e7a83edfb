"""
Response parser turning grouped query results into named series.

Every raw row becomes exactly one series, in row order within result order.
A malformed scalar or a row whose arity does not match its columns fails the
whole call; nothing is dropped silently and no partial output is returned.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List

from engine.naming.alias import AliasContext, resolve_alias
from engine.naming.default import default_name
from engine.series.extractor import extract_series
from engine.series.models import QueryDescriptor, RawResult, RawRow, Series

log = logging.getLogger(__name__)


class ResponseParser:

    def parse(self, results: Iterable[RawResult], query: QueryDescriptor) -> List[Series]:
        series: List[Series] = []
        rows = 0
        for result in results:
            for row in result.rows:
                rows += 1
                series.append(self.transform_row(row, query))
        log.debug("parsed %d row(s) into %d series (measurement=%r)", rows, len(series), query.measurement)
        return series

    def transform_row(self, row: RawRow, query: QueryDescriptor) -> Series:
        extracted = extract_series(row)
        return dataclasses.replace(extracted, name=self.series_name(row, query))

    @staticmethod
    def series_name(row: RawRow, query: QueryDescriptor) -> str:
        if query.alias:
            ctx = AliasContext(
                measurement=query.measurement,
                row_name=row.name,
                columns=row.columns,
                tags=row.tags,
            )
            return resolve_alias(query.alias, ctx)
        return default_name(row.name, row.columns)


def parse_response(results: Iterable[RawResult], query: QueryDescriptor) -> List[Series]:
    return ResponseParser().parse(results, query)
