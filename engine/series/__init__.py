"""
Series subpackage: raw row models, numeric decoding, row extraction and the
response parser that assembles named series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.series.decoder import decode_timestamp, decode_value
from engine.series.extractor import extract_series
from engine.series.models import Point, QueryDescriptor, RawResult, RawRow, Series
from engine.series.parser import ResponseParser, parse_response

__all__ = [
    "Point",
    "QueryDescriptor",
    "RawResult",
    "RawRow",
    "ResponseParser",
    "Series",
    "decode_timestamp",
    "decode_value",
    "extract_series",
    "parse_response",
]
