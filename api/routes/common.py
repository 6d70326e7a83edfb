"""
Shared utilities and dependencies for API route modules.

Provides a centralized place for creating data source providers (one per
InfluxDB database) and closing them on shutdown, so individual route files
stay thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from datasources.data_config import DataSourceSettings
from datasources.provider import DataSourceProvider


_providers: dict[str, DataSourceProvider] = {}


def get_provider(database: Optional[str] = None) -> DataSourceProvider:
    settings = DataSourceSettings()
    resolved = database or settings.influxdb_database
    provider = _providers.get(resolved)
    if provider is None:
        provider = DataSourceProvider(settings=settings, database=resolved)
        _providers[resolved] = provider
    return provider


async def close_providers() -> None:

    providers = list(_providers.values())
    _providers.clear()
    for provider in providers:
        await provider.aclose()
