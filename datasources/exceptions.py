# datasources/exceptions.py

from typing import Optional


class DataSourceError(Exception):
    pass


class DataSourceUnavailable(DataSourceError):
    pass


class QueryTimeout(DataSourceError):
    pass


class InvalidQuery(DataSourceError):
    pass


class StatementError(InvalidQuery):
    def __init__(self, message: str, statement_id: Optional[int] = None):
        self.statement_id = statement_id
        prefix = "" if statement_id is None else f"statement {statement_id}: "
        super().__init__(f"{prefix}{message}")


class BackendStartupTimeout(DataSourceError):
    pass
