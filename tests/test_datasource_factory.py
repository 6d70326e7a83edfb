"""
Tests for datasource factory connector construction and settings validation.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from config import METRICS_BACKEND_INFLUXDB
from connectors.influxdb import InfluxDBConnector
from datasources.data_config import DataSourceSettings
from datasources.factory import DataSourceFactory
from datasources.provider import DataSourceProvider
from api.routes.common import get_provider


def _cfg(**overrides):
    base = dict(
        metrics_backend=METRICS_BACKEND_INFLUXDB,
        influxdb_url="http://influx:8086",
        influxdb_database="telegraf",
        influxdb_username=None,
        influxdb_password=None,
        influxdb_epoch="ms",
        connector_timeout=42,
    )
    base.update(overrides)
    return SimpleNamespace(**base)


def test_factory_builds_influx_connector_with_settings():
    conn = DataSourceFactory.create_metrics(_cfg(influxdb_username="u", influxdb_epoch="s"), "metrics")
    assert isinstance(conn, InfluxDBConnector)
    assert conn.timeout == 42
    assert conn.database == "metrics"
    assert conn.username == "u"
    assert conn.epoch == "s"


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        DataSourceFactory.create_metrics(_cfg(metrics_backend="graphite"), "db")


def test_provider_defaults_to_configured_database():
    provider = DataSourceProvider(settings=_cfg())
    assert provider.database == "telegraf"
    assert provider.metrics.database == "telegraf"


def test_settings_strip_trailing_slash_and_validate_epoch():
    cfg = DataSourceSettings(influxdb_url="http://influx:8086/", influxdb_epoch="s")
    assert cfg.influxdb_url == "http://influx:8086"
    with pytest.raises(ValidationError):
        DataSourceSettings(influxdb_epoch="weeks")
    with pytest.raises(ValidationError):
        DataSourceSettings(metrics_backend="prometheus")


def test_get_provider_caches_per_database():
    first = get_provider("a")
    assert get_provider("a") is first
    assert get_provider("b") is not first
