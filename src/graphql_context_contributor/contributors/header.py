"""Header-driven contributors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from graphql_context_contributor.contributor import ContextContributor

if TYPE_CHECKING:
    from graphql_context_contributor._types import Extensions, InboundRequest
    from graphql_context_contributor.context import ContextBuilder

CONTRIBUTOR_ENABLED_CONTEXT_KEY = "contributorEnabled"
CONTRIBUTOR_ENABLED_CONTEXT_VALUE = "true"
CONTEXT_CONTRIBUTOR_HEADER_NAME = "context-contributor-header"
CONTEXT_CONTRIBUTOR_HEADER_VALUE = "enabled"


class HeaderFlagContributor(ContextContributor):
    """Marks the context when the contributor header is set to ``enabled``."""

    def contribute(
        self,
        builder: ContextBuilder,
        extensions: Extensions | None = None,
        request: InboundRequest | None = None,
    ) -> None:
        if request is None:
            return

        value = request.headers.get(CONTEXT_CONTRIBUTOR_HEADER_NAME)
        if value == CONTEXT_CONTRIBUTOR_HEADER_VALUE:
            builder.put(
                CONTRIBUTOR_ENABLED_CONTEXT_KEY, CONTRIBUTOR_ENABLED_CONTEXT_VALUE
            )
