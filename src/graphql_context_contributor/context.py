"""ContextBuilder and GraphQLContext — per-request context state."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from strawberry.fastapi import BaseContext

from graphql_context_contributor.contributors.header import (
    CONTRIBUTOR_ENABLED_CONTEXT_KEY,
    CONTRIBUTOR_ENABLED_CONTEXT_VALUE,
)
from graphql_context_contributor.exceptions import ContextFinalizedError

if TYPE_CHECKING:
    from graphql_context_contributor.trace import ContributionTrace


class ContextBuilder:
    """Mutable per-request accumulator finalized into a read-only mapping."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._built: MappingProxyType[str, Any] | None = None

    @property
    def is_built(self) -> bool:
        return self._built is not None

    def put(self, key: str, value: Any) -> ContextBuilder:
        if self._built is not None:
            raise ContextFinalizedError(key)
        self._values[key] = value
        return self

    def put_all(self, values: Mapping[str, Any]) -> ContextBuilder:
        for key, value in values.items():
            self.put(key, value)
        return self

    def build(self) -> Mapping[str, Any]:
        """Finalize the builder. Repeated calls return the same snapshot."""
        if self._built is None:
            self._built = MappingProxyType(dict(self._values))
        return self._built

    def __len__(self) -> int:
        return len(self._values)


class GraphQLContext(BaseContext):
    """Context passed to every GraphQL resolver.

    Strawberry fills in ``request``, ``response`` and ``background_tasks``
    once the context getter returns.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        trace: ContributionTrace | None = None,
    ) -> None:
        super().__init__()
        self.values: Mapping[str, Any] = (
            values if values is not None else MappingProxyType({})
        )
        self.trace = trace

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    @property
    def contributor_enabled(self) -> bool:
        return self.values.get(CONTRIBUTOR_ENABLED_CONTEXT_KEY) == (
            CONTRIBUTOR_ENABLED_CONTEXT_VALUE
        )

    def get_http_request_header(self, name: str) -> str | None:
        """First value of an inbound header, or None without a request."""
        connection = self.request
        if connection is None:
            return None
        return connection.headers.get(name)
