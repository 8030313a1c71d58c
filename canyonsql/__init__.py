"""SQL statement building, parameter binding and entity metadata for SQL datasources."""

__version__ = "0.1.0"

__all__ = [
    "bounds",
    "config",
    "entities",
    "operators",
    "params",
    "query_builder",
    "rows",
    "statements",
]