"""
Constants and configuration for InfluxSeries.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


METRICS_BACKEND_INFLUXDB = "influxdb"

INFLUXSERIES_METRICS_BACKEND = os.getenv("INFLUXSERIES_METRICS_BACKEND", METRICS_BACKEND_INFLUXDB).lower()
INFLUXSERIES_INFLUXDB_URL = os.getenv("INFLUXSERIES_INFLUXDB_URL", "http://influxdb:8086").rstrip("/")
INFLUXSERIES_INFLUXDB_DATABASE = os.getenv("INFLUXSERIES_INFLUXDB_DATABASE", "telegraf")
INFLUXSERIES_INFLUXDB_USERNAME = os.getenv("INFLUXSERIES_INFLUXDB_USERNAME", "")
INFLUXSERIES_INFLUXDB_PASSWORD = os.getenv("INFLUXSERIES_INFLUXDB_PASSWORD", "")
INFLUXSERIES_INFLUXDB_EPOCH = os.getenv("INFLUXSERIES_INFLUXDB_EPOCH", "ms")

INFLUXSERIES_CONNECTOR_TIMEOUT = int(os.getenv("INFLUXSERIES_CONNECTOR_TIMEOUT", "30"))
INFLUXSERIES_STARTUP_TIMEOUT = int(os.getenv("INFLUXSERIES_STARTUP_TIMEOUT", "120"))

DATASOURCE_TIMEOUT = 30
HEALTH_PATH = "/ping"

# epoch precisions accepted by the InfluxDB 1.x /query endpoint
EPOCH_PRECISIONS = ("ns", "u", "ms", "s", "m", "h")

# response layout
TIME_COLUMN_INDEX = 0
VALUE_COLUMN_INDEX = 1
NULL_SENTINEL = "null"
COLUMN_SEPARATOR = "-"
SEGMENT_SEPARATOR = "."
NAME_SEPARATOR = "."


class Settings(BaseSettings):
    # upper bound on targets queried concurrently by the fetcher
    max_parallel_queries: int = 8

    server_host: str = "0.0.0.0"
    server_port: int = 4323

    model_config = {
        "env_prefix": "INFLUXSERIES_",
        "extra": "ignore",
    }


settings = Settings()
