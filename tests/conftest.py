"""Shared pytest fixtures for graphql-context-contributor tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from graphql_context_contributor.context import ContextBuilder


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects from a raw ASGI scope.

    ``headers`` may be a dict or a list of pairs; a list keeps repeated names.
    Header names are lowercased, as ASGI servers deliver them.
    """

    def _make(
        method: str = "POST",
        path: str = "/graphql",
        headers: dict[str, str] | list[tuple[str, str]] | None = None,
    ) -> Request:
        pairs = headers.items() if isinstance(headers, dict) else (headers or [])
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [(k.lower().encode(), v.encode()) for k, v in pairs],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def builder() -> ContextBuilder:
    return ContextBuilder()
