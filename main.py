"""
Entry point for the InfluxSeries API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import router
from api.routes.common import close_providers, get_provider
from config import settings, METRICS_BACKEND_INFLUXDB
from datasources.data_config import DataSourceSettings
from datasources.exceptions import BackendStartupTimeout
from datasources.provider import DataSourceProvider

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)

_backend_ready = False
_backend_status: Dict[str, str] = {}


async def wait_for(name: str, provider: DataSourceProvider, timeout: float, interval: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    attempt = 0
    while time.monotonic() < deadline:
        attempt += 1
        try:
            await provider.ping()
            log.info("%s ready (attempt %d)", name, attempt)
            return
        except Exception as exc:
            log.debug("%s not reachable (attempt %d): %s", name, attempt, exc)
        await asyncio.sleep(interval)
    raise BackendStartupTimeout(f"{name} did not become ready within {timeout}s")


async def _wait_for_backend_bg(cfg: DataSourceSettings) -> None:
    global _backend_ready

    name = METRICS_BACKEND_INFLUXDB
    _backend_status[name] = "waiting"
    log.info("Backend readiness check starting (timeout=%ds) ...", cfg.startup_timeout)
    try:
        await wait_for(name, get_provider(cfg.influxdb_database), cfg.startup_timeout)
    except BackendStartupTimeout as exc:
        log.error("%s failed readiness: %s", name, exc)
        _backend_status[name] = f"failed: {exc}"
        # /series/parse needs no backend, so the service stays up
        _backend_ready = False
        return
    _backend_status[name] = "ready"
    _backend_ready = True


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    readiness_task = asyncio.create_task(_wait_for_backend_bg(DataSourceSettings()))
    try:
        yield
    finally:
        readiness_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await readiness_task
        await close_providers()


app = FastAPI(
    title="InfluxSeries",
    description="Parses InfluxDB query responses into named, typed time series.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


@app.get("/api/v1/ready", tags=["health"], summary="Backend readiness probe")
async def ready() -> JSONResponse:
    code = 200 if _backend_ready else 503
    return JSONResponse(
        status_code=code,
        content={"ready": _backend_ready, "backends": _backend_status},
    )


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level="info",
        access_log=True,
    )
