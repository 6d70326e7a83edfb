"""
Data structures for raw grouped query rows and the named series parsed from them.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


@dataclass(frozen=True)
class RawRow:
    name: str
    columns: Sequence[str]
    tags: Mapping[str, str] = field(default_factory=dict)
    values: Sequence[Sequence[Any]] = field(default_factory=list)


@dataclass(frozen=True)
class RawResult:
    rows: Sequence[RawRow] = field(default_factory=list)
    statement_id: int = 0


@dataclass(frozen=True)
class QueryDescriptor:
    measurement: str = ""
    alias: Optional[str] = None


@dataclass(frozen=True)
class Point:
    time: float
    value: Optional[float]

    @property
    def valid(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class Series:
    name: str
    tags: Mapping[str, str]
    points: Tuple[Point, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.tags, MappingProxyType):
            object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "tags": dict(self.tags),
            "points": [
                {"time": p.time, "value": p.value, "valid": p.valid}
                for p in self.points
            ],
        }
