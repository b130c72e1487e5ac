"""Typed result sets, prepared statements, transactions and time values over MariaDB/MySQL DB-API connections."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "errors",
    "conversion",
    "data",
    "time_span",
    "timeofday",
    "result_set",
    "statement",
    "transaction",
    "worker",
]