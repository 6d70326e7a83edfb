"""
Tests for series query/parse route semantics.
"""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from api.requests import ParseRequest, SeriesQueryRequest, TargetRequest
from api.routes import health as health_route
from api.routes import series as series_route
from datasources.exceptions import DataSourceUnavailable
from engine.series.models import RawResult, RawRow


class DummyProvider:
    async def query_metrics(self, query):
        if query == "down":
            raise DataSourceUnavailable("Cannot reach InfluxDB at http://influx:8086/query")
        return [RawResult(rows=[
            RawRow(
                name="cpu",
                columns=["time", "mean", "sum"],
                tags={"datacenter": "America"},
                values=[["111", "222", "333"], ["112", "null", "333"]],
            )
        ])]


PAYLOAD = {
    "results": [
        {
            "statement_id": 0,
            "series": [
                {
                    "name": "cpu.upc",
                    "columns": ["time", "mean", "sum"],
                    "tags": {"datacenter": "America", "dc.region.name": "Northeast"},
                    "values": [[111, 222, 333], [112, None, 333]],
                }
            ],
        }
    ]
}


@pytest.mark.asyncio
async def test_query_route_returns_series_per_target(monkeypatch):
    seen = {}

    def fake_provider(database=None):
        seen["database"] = database
        return DummyProvider()

    monkeypatch.setattr(series_route, "get_provider", fake_provider)
    req = SeriesQueryRequest(
        database="telegraf",
        targets=[
            TargetRequest(ref_id="A", query="SELECT mean, sum FROM cpu"),
            TargetRequest(ref_id="B", query="SELECT mean FROM cpu", alias="$tag_datacenter"),
        ],
    )
    rows = await series_route.query_series(req)

    assert seen["database"] == "telegraf"
    assert [r.ref_id for r in rows] == ["A", "B"]
    assert rows[0].series[0].name == "cpu.mean-sum"
    assert rows[1].series[0].name == "America"
    points = rows[0].series[0].points
    assert (points[0].value, points[0].valid) == (222.0, True)
    assert (points[1].value, points[1].valid) == (None, False)


@pytest.mark.asyncio
async def test_query_route_reports_target_errors_inline(monkeypatch):
    monkeypatch.setattr(series_route, "get_provider", lambda database=None: DummyProvider())
    req = SeriesQueryRequest(targets=[
        TargetRequest(ref_id="A", query="down"),
        TargetRequest(ref_id="B", query="up"),
    ])
    rows = await series_route.query_series(req)

    assert rows[0].series == []
    assert "Cannot reach InfluxDB" in rows[0].error
    assert rows[1].error is None
    assert len(rows[1].series) == 1


@pytest.mark.asyncio
async def test_parse_route_names_with_alias():
    req = ParseRequest(payload=PAYLOAD, measurement="10m", alias="[[m]] [[tag_dc.region.name]] $1")
    rows = await series_route.parse_series(req)

    assert len(rows) == 1
    assert rows[0].name == "10m Northeast upc"
    assert rows[0].tags == {"datacenter": "America", "dc.region.name": "Northeast"}
    assert [p.valid for p in rows[0].points] == [True, False]


@pytest.mark.asyncio
async def test_parse_route_rejects_malformed_scalars_with_422():
    payload = {"results": [{"series": [{"name": "m", "columns": ["time", "v"], "values": [[1, "oops"]]}]}]}
    with pytest.raises(HTTPException) as exc_info:
        await series_route.parse_series(ParseRequest(payload=payload))
    assert exc_info.value.status_code == 422


@pytest.mark.asyncio
async def test_parse_route_maps_statement_errors_to_502():
    payload = {"results": [{"statement_id": 0, "error": "database not found: nope"}]}
    with pytest.raises(HTTPException) as exc_info:
        await series_route.parse_series(ParseRequest(payload=payload))
    assert exc_info.value.status_code == 502
    assert "database not found" in exc_info.value.detail


@pytest.mark.asyncio
async def test_health_route():
    body = await health_route.health()
    assert body["status"] == "ok"
    assert body["backend"] == "influxdb"
