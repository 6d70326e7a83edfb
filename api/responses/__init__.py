"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from engine.fetcher import QueryResult
from engine.series.models import Series


class PointModel(BaseModel):

    time: float
    value: Optional[float]
    valid: bool


class SeriesModel(BaseModel):

    name: str
    tags: Dict[str, str] = Field(default_factory=dict)
    points: List[PointModel] = Field(default_factory=list)

    @classmethod
    def from_series(cls, series: Series) -> SeriesModel:
        return cls.model_validate(series.to_dict())


class QueryResultModel(BaseModel):

    ref_id: str
    series: List[SeriesModel] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: QueryResult) -> QueryResultModel:
        return cls(
            ref_id=result.ref_id,
            series=[SeriesModel.from_series(s) for s in result.series],
            error=result.error,
        )
