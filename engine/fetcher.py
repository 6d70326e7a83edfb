"""
Fetcher Module for running query targets concurrently and parsing their series

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from datasources.provider import DataSourceProvider
from engine.series.models import QueryDescriptor, Series
from engine.series.parser import ResponseParser
from config import settings

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryTarget:
    ref_id: str
    query: str
    measurement: str = ""
    alias: Optional[str] = None

    @property
    def descriptor(self) -> QueryDescriptor:
        return QueryDescriptor(measurement=self.measurement, alias=self.alias)


@dataclass(frozen=True)
class QueryResult:
    ref_id: str
    series: List[Series] = field(default_factory=list)
    error: Optional[str] = None


async def fetch_series(
    provider: DataSourceProvider,
    targets: Sequence[QueryTarget],
    parser: Optional[ResponseParser] = None,
) -> List[QueryResult]:
    parser = parser or ResponseParser()
    max_parallel = max(1, int(settings.max_parallel_queries))
    sem = asyncio.Semaphore(max_parallel)

    async def _run(target: QueryTarget) -> List[Series]:
        async with sem:
            raw = await provider.query_metrics(query=target.query)
        return parser.parse(raw, target.descriptor)

    outcomes = await asyncio.gather(*[_run(t) for t in targets], return_exceptions=True)

    results: List[QueryResult] = []
    for target, outcome in zip(targets, outcomes):
        if isinstance(outcome, Exception):
            log.warning("fetch_series ref_id=%s query=%s failed: %s", target.ref_id, target.query, outcome)
            results.append(QueryResult(ref_id=target.ref_id, error=str(outcome)))
            continue
        log.debug("fetch_series ref_id=%s series=%d", target.ref_id, len(outcome))
        results.append(QueryResult(ref_id=target.ref_id, series=outcome))
    return results
