"""
Default series naming used when a query carries no alias template.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from config import COLUMN_SEPARATOR, NAME_SEPARATOR


def joined_value_columns(columns: Sequence[str]) -> str:
    return COLUMN_SEPARATOR.join(columns[1:])


def default_name(measurement: str, columns: Sequence[str]) -> str:
    # tags stay structured on the series, never folded into the name
    return f"{measurement}{NAME_SEPARATOR}{joined_value_columns(columns)}"
