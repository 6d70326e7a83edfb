"""
InfluxDB 1.x Connector

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
import logging
from typing import Any, Dict, List, Optional

from datasources.retry import retry

from datasources.base import MetricsConnector
from datasources.helpers import fetch_payload, fetch_status
from datasources.exceptions import DataSourceUnavailable, InvalidQuery, QueryTimeout, StatementError
from engine.series.models import RawResult, RawRow
from config import HEALTH_PATH, DATASOURCE_TIMEOUT

log = logging.getLogger(__name__)


class InfluxDBConnector(MetricsConnector):
    # health_path used by the shared property in BaseConnector
    health_path = HEALTH_PATH

    def __init__(
        self,
        base_url: str,
        database: str,
        timeout: int = DATASOURCE_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        epoch: str = "ms",
    ):
        super().__init__(database, base_url, timeout, headers)
        self.username = username
        self.password = password
        self.epoch = epoch

    def _params(self, query: str, database: Optional[str]) -> Dict[str, Any]:
        params: Dict[str, Any] = {"q": query, "db": database or self.database, "epoch": self.epoch}
        if self.username:
            params["u"] = self.username
            params["p"] = self.password or ""
        return params

    @retry(attempts=3, delay=0.5, backoff=2.0, exceptions=(DataSourceUnavailable, QueryTimeout))
    async def query(
        self,
        query: str,
        database: Optional[str] = None,
    ) -> List[RawResult]:
        url = f"{self.base_url}/query"
        payload = await fetch_payload(
            url,
            params=self._params(query, database),
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="InfluxDB query failed",
            timeout_msg="InfluxDB query timed out",
            unavailable_msg="Cannot reach InfluxDB at",
        )
        return self.decode_results(payload)

    async def ping(self) -> None:
        await fetch_status(
            self.health_url,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="InfluxDB ping failed",
            timeout_msg="InfluxDB ping timed out",
            unavailable_msg="Cannot reach InfluxDB at",
        )

    @staticmethod
    def decode_results(payload: Dict[str, Any]) -> List[RawResult]:
        """Map a ``/query`` JSON payload onto raw results, one per statement.

        A top-level ``error`` or any statement-level ``error`` fails the whole
        payload with :class:`StatementError`.
        """
        if payload.get("error"):
            raise StatementError(str(payload["error"]))

        results = payload.get("results", [])
        if not isinstance(results, list):
            raise InvalidQuery(f"'results' is not a list: {type(results).__name__}")

        decoded: List[RawResult] = []
        for position, result in enumerate(results):
            if not isinstance(result, dict):
                raise InvalidQuery(f"result {position} is not an object")
            try:
                statement_id = int(result.get("statement_id", position))
            except (TypeError, ValueError):
                raise InvalidQuery(f"result {position} has a non-numeric statement_id: {result.get('statement_id')!r}") from None
            if result.get("error"):
                raise StatementError(str(result["error"]), statement_id=statement_id)
            rows = [InfluxDBConnector._decode_row(raw) for raw in result.get("series") or []]
            log.debug("statement %d returned %d row(s)", statement_id, len(rows))
            decoded.append(RawResult(rows=rows, statement_id=statement_id))
        return decoded

    @staticmethod
    def _decode_row(raw: Any) -> RawRow:
        if not isinstance(raw, dict):
            raise InvalidQuery(f"series entry is not an object: {raw!r}")
        values = raw.get("values") or []
        if not all(isinstance(v, list) for v in values):
            raise InvalidQuery(f"series {raw.get('name')!r} has a non-list value tuple")
        tags = raw.get("tags") or {}
        if not isinstance(tags, dict):
            raise InvalidQuery(f"series {raw.get('name')!r} has non-object tags")
        # a null tag value means the series has no such tag
        return RawRow(
            name=str(raw.get("name", "")),
            columns=[str(c) for c in raw.get("columns") or []],
            tags={str(k): str(v) for k, v in tags.items() if v is not None},
            values=values,
        )
