import os
import sys
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.series.models import RawResult, RawRow


@pytest.fixture(autouse=True)
def clear_providers():
    """Drop cached per-database providers so each test builds its own."""
    from api.routes import common

    common._providers.clear()
    yield
    common._providers.clear()


@pytest.fixture
def cpu_row() -> RawRow:
    return RawRow(
        name="cpu",
        columns=["time", "mean", "sum"],
        tags={"datacenter": "America"},
        values=[
            ["111", "222", "333"],
            ["111", "222", "333"],
            ["111", "null", "333"],
        ],
    )


@pytest.fixture
def dotted_row() -> RawRow:
    return RawRow(
        name="cpu.upc",
        columns=["time", "mean", "sum"],
        tags={"datacenter": "America", "dc.region.name": "Northeast"},
        values=[["111", "222", "333"]],
    )


@pytest.fixture
def cpu_results(cpu_row) -> list:
    return [RawResult(rows=[cpu_row])]


@pytest.fixture
def dotted_results(dotted_row) -> list:
    return [RawResult(rows=[dotted_row])]
