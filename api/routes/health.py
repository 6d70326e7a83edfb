"""
Health check route reporting service liveness and the configured backend.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict

from fastapi import APIRouter

from api.routes.exception import handle_exceptions
from datasources.data_config import DataSourceSettings

router = APIRouter(tags=["Health"])


@router.get("/health")
@handle_exceptions
async def health() -> Dict[str, Any]:
    cfg = DataSourceSettings()
    return {
        "status": "ok",
        "backend": cfg.metrics_backend,
        "database": cfg.influxdb_database,
    }
