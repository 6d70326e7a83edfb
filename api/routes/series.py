"""
Series routes: run InfluxQL targets against the backend, or parse an InfluxDB
payload the caller already holds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import List

from fastapi import APIRouter

from api.requests import ParseRequest, SeriesQueryRequest
from api.responses import QueryResultModel, SeriesModel
from api.routes.common import get_provider
from api.routes.exception import handle_exceptions
from connectors.influxdb import InfluxDBConnector
from engine.fetcher import QueryTarget, fetch_series
from engine.series.models import QueryDescriptor
from engine.series.parser import ResponseParser

router = APIRouter(tags=["Series"])


@router.post("/series/query", response_model=List[QueryResultModel])
@handle_exceptions
async def query_series(req: SeriesQueryRequest) -> List[QueryResultModel]:
    targets = [
        QueryTarget(ref_id=t.ref_id, query=t.query, measurement=t.measurement, alias=t.alias)
        for t in req.targets
    ]
    results = await fetch_series(get_provider(req.database), targets)
    return [QueryResultModel.from_result(r) for r in results]


@router.post("/series/parse", response_model=List[SeriesModel])
@handle_exceptions
async def parse_series(req: ParseRequest) -> List[SeriesModel]:
    raw = InfluxDBConnector.decode_results(req.payload)
    series = ResponseParser().parse(raw, QueryDescriptor(measurement=req.measurement, alias=req.alias))
    return [SeriesModel.from_series(s) for s in series]
