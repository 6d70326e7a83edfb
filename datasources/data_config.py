"""
Data source settings for the InfluxDB query backend

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    EPOCH_PRECISIONS,
    METRICS_BACKEND_INFLUXDB,
    INFLUXSERIES_METRICS_BACKEND,
    INFLUXSERIES_INFLUXDB_URL,
    INFLUXSERIES_INFLUXDB_DATABASE,
    INFLUXSERIES_INFLUXDB_USERNAME,
    INFLUXSERIES_INFLUXDB_PASSWORD,
    INFLUXSERIES_INFLUXDB_EPOCH,
    INFLUXSERIES_CONNECTOR_TIMEOUT,
    INFLUXSERIES_STARTUP_TIMEOUT,
)

class DataSourceSettings(BaseSettings):
    metrics_backend: str = INFLUXSERIES_METRICS_BACKEND
    influxdb_url: str = INFLUXSERIES_INFLUXDB_URL
    influxdb_database: str = INFLUXSERIES_INFLUXDB_DATABASE
    influxdb_username: Optional[str] = INFLUXSERIES_INFLUXDB_USERNAME or None
    influxdb_password: Optional[str] = INFLUXSERIES_INFLUXDB_PASSWORD or None
    influxdb_epoch: str = INFLUXSERIES_INFLUXDB_EPOCH
    connector_timeout: int = INFLUXSERIES_CONNECTOR_TIMEOUT
    startup_timeout: int = INFLUXSERIES_STARTUP_TIMEOUT

    @field_validator("influxdb_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return str(v).rstrip("/") if v is not None else v

    @field_validator("metrics_backend", mode="before")
    @classmethod
    def validate_metrics_backend(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {METRICS_BACKEND_INFLUXDB}:
            raise ValueError(f"Unsupported metrics backend: {value!r}")
        return value

    @field_validator("influxdb_epoch", mode="before")
    @classmethod
    def validate_epoch(cls, v: str) -> str:
        value = str(v or "").strip()
        if value not in EPOCH_PRECISIONS:
            raise ValueError(f"Unsupported epoch precision: {value!r}")
        return value

    model_config = {"env_prefix": "INFLUXSERIES_", "extra": "ignore"}
