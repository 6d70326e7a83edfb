"""
Provider for the metrics connector bound to one database.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import List, Optional

from engine.series.models import RawResult
from .data_config import DataSourceSettings
from .factory import DataSourceFactory

class DataSourceProvider:
    def __init__(self, settings: DataSourceSettings, database: Optional[str] = None):
        self.settings = settings
        self.database = database or settings.influxdb_database
        self.metrics = DataSourceFactory.create_metrics(settings, self.database)

    async def query_metrics(self, query: str) -> List[RawResult]:
        return await self.metrics.query(query=query, database=self.database)

    async def ping(self) -> None:
        await self.metrics.ping()

    async def aclose(self) -> None:
        await self.metrics.aclose()
