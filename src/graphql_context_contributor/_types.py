"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.requests import HTTPConnection

# GraphQL request extensions, as sent alongside the query
Extensions = Mapping[str, Any]

# HTTP request or websocket handed to contributors
InboundRequest = HTTPConnection
