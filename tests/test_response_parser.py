"""
Test cases for the response parser, covering point extraction, null handling,
default naming and alias naming across multiple results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.exceptions import MalformedScalar, StructuralMismatch
from engine.series.models import QueryDescriptor, RawResult, RawRow
from engine.series.parser import ResponseParser, parse_response


def test_parses_all_series(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor())
    assert len(result) == 1


def test_parses_all_points(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor())
    assert len(result[0].points) == 3


def test_parses_multi_row_values(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor())
    assert result[0].points[1].value == 222.0
    assert result[0].points[1].valid is True


def test_parses_null_points(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor())
    assert result[0].points[2].valid is False


def test_formats_default_series_name(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor())
    assert result[0].name == "cpu.mean-sum"
    assert result[0].tags == {"datacenter": "America"}


def test_default_name_uses_row_name_not_measurement(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor(measurement="other"))
    assert result[0].name == "cpu.mean-sum"


def test_empty_alias_falls_back_to_default_name(cpu_results):
    result = ResponseParser().parse(cpu_results, QueryDescriptor(alias=""))
    assert result[0].name == "cpu.mean-sum"


@pytest.mark.parametrize("alias,measurement,expected", [
    ("serie alias", "", "serie alias"),
    ("alias $m $measurement", "10m", "alias 10m 10m"),
    ("alias $col", "10m", "alias mean-sum"),
    ("alias $tag_datacenter", "", "alias America"),
    ("alias $1", "", "alias upc"),
    ("alias $5", "", "alias $5"),
    ("alias [[m]] [[measurement]]", "10m", "alias 10m 10m"),
    ("alias [[col]]", "10m", "alias mean-sum"),
    ("alias [[tag_datacenter]]", "", "alias America"),
    ("alias [[tag_dc.region.name]]", "", "alias Northeast"),
])
def test_alias_naming(dotted_results, alias, measurement, expected):
    result = ResponseParser().parse(dotted_results, QueryDescriptor(measurement=measurement, alias=alias))
    assert result[0].name == expected


def test_series_follow_row_then_result_order():
    results = [
        RawResult(rows=[
            RawRow(name="a", columns=["time", "v"], values=[["1", "1"]]),
            RawRow(name="b", columns=["time", "v"], values=[]),
        ], statement_id=0),
        RawResult(rows=[
            RawRow(name="c", columns=["time", "v"], values=[["1", "null"]]),
        ], statement_id=1),
    ]
    result = parse_response(results, QueryDescriptor())
    assert [s.name for s in result] == ["a.v", "b.v", "c.v"]
    assert [len(s.points) for s in result] == [1, 0, 1]


def test_empty_results_give_no_series():
    assert parse_response([], QueryDescriptor()) == []
    assert parse_response([RawResult(rows=[])], QueryDescriptor()) == []


def test_malformed_scalar_fails_whole_parse():
    results = [RawResult(rows=[
        RawRow(name="ok", columns=["time", "v"], values=[["1", "1"]]),
        RawRow(name="bad", columns=["time", "v"], values=[["1", "x"]]),
    ])]
    with pytest.raises(MalformedScalar):
        parse_response(results, QueryDescriptor())


def test_structural_mismatch_fails_whole_parse():
    results = [RawResult(rows=[RawRow(name="bad", columns=["time", "v"], values=[["1"]])])]
    with pytest.raises(StructuralMismatch):
        parse_response(results, QueryDescriptor())


def test_parse_is_idempotent(dotted_results, cpu_results):
    query = QueryDescriptor(measurement="10m", alias="$m $tag_datacenter $1")
    results = cpu_results + dotted_results
    first = parse_response(results, query)
    second = parse_response(results, query)
    assert first == second
    assert [s.name for s in first] == ["10m America $1", "10m America upc"]


def test_parse_does_not_mutate_input(cpu_row):
    snapshot = ([list(v) for v in cpu_row.values], dict(cpu_row.tags), list(cpu_row.columns))
    parse_response([RawResult(rows=[cpu_row])], QueryDescriptor(alias="$col"))
    assert ([list(v) for v in cpu_row.values], dict(cpu_row.tags), list(cpu_row.columns)) == snapshot
