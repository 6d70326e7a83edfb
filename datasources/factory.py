"""
Factory for creating data source connectors based on configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from connectors.influxdb import InfluxDBConnector


class DataSourceFactory:

    @staticmethod
    def create_metrics(config, database):
        from config import METRICS_BACKEND_INFLUXDB

        if config.metrics_backend == METRICS_BACKEND_INFLUXDB:
            return InfluxDBConnector(
                config.influxdb_url,
                database,
                timeout=config.connector_timeout,
                username=config.influxdb_username,
                password=config.influxdb_password,
                epoch=config.influxdb_epoch,
            )
        raise ValueError("Unsupported metrics backend")
