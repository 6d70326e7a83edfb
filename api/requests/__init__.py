from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class TargetRequest(BaseModel):
    ref_id: str = "A"
    query: str = Field(min_length=1)
    measurement: str = ""
    alias: Optional[str] = None


class SeriesQueryRequest(BaseModel):
    database: Optional[str] = None
    targets: List[TargetRequest] = Field(min_length=1)


class ParseRequest(BaseModel):
    payload: Dict[str, Any]
    measurement: str = ""
    alias: Optional[str] = None
