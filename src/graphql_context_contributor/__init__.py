"""GraphQL Context Contributor - per-request context contributors for Strawberry on FastAPI."""

from graphql_context_contributor._types import Extensions, InboundRequest
from graphql_context_contributor.context import ContextBuilder, GraphQLContext
from graphql_context_contributor.contributor import ContextContributor
from graphql_context_contributor.contributors.header import (
    CONTEXT_CONTRIBUTOR_HEADER_NAME,
    CONTEXT_CONTRIBUTOR_HEADER_VALUE,
    CONTRIBUTOR_ENABLED_CONTEXT_KEY,
    CONTRIBUTOR_ENABLED_CONTEXT_VALUE,
    HeaderFlagContributor,
)
from graphql_context_contributor.dependency import context_getter
from graphql_context_contributor.exceptions import (
    ContextFinalizedError,
    ContributorError,
    ContributorException,
)
from graphql_context_contributor.pipeline import ContributorPipeline, ResolvedPipeline
from graphql_context_contributor.trace import ContributionTrace, TraceEntry

__all__ = [
    "CONTEXT_CONTRIBUTOR_HEADER_NAME",
    "CONTEXT_CONTRIBUTOR_HEADER_VALUE",
    "CONTRIBUTOR_ENABLED_CONTEXT_KEY",
    "CONTRIBUTOR_ENABLED_CONTEXT_VALUE",
    "ContextBuilder",
    "ContextContributor",
    "ContextFinalizedError",
    "ContributionTrace",
    "ContributorError",
    "ContributorException",
    "ContributorPipeline",
    "Extensions",
    "GraphQLContext",
    "HeaderFlagContributor",
    "InboundRequest",
    "ResolvedPipeline",
    "TraceEntry",
    "context_getter",
]
