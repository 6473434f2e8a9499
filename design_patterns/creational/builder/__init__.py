"""Builder pattern examples."""

from .builder import (
    Computer,
    ComputerBuilder,
    ComputerDirector,
    HttpRequest,
    HttpRequestBuilder,
    SQLQuery,
    SQLQueryBuilder,
)

__all__ = [
    "Computer",
    "ComputerBuilder",
    "ComputerDirector",
    "HttpRequest",
    "HttpRequestBuilder",
    "SQLQuery",
    "SQLQueryBuilder",
]
