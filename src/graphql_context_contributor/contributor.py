"""ContextContributor abstract base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphql_context_contributor._types import Extensions, InboundRequest
    from graphql_context_contributor.context import ContextBuilder


class ContextContributor(ABC):
    """Pluggable unit that adds entries to the per-request context."""

    @abstractmethod
    def contribute(
        self,
        builder: ContextBuilder,
        extensions: Extensions | None = None,
        request: InboundRequest | None = None,
    ) -> None: ...
