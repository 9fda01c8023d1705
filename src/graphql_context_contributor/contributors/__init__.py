"""Built-in context contributors."""

from graphql_context_contributor.contributors.header import (
    CONTEXT_CONTRIBUTOR_HEADER_NAME,
    CONTEXT_CONTRIBUTOR_HEADER_VALUE,
    CONTRIBUTOR_ENABLED_CONTEXT_KEY,
    CONTRIBUTOR_ENABLED_CONTEXT_VALUE,
    HeaderFlagContributor,
)

__all__ = [
    "CONTEXT_CONTRIBUTOR_HEADER_NAME",
    "CONTEXT_CONTRIBUTOR_HEADER_VALUE",
    "CONTRIBUTOR_ENABLED_CONTEXT_KEY",
    "CONTRIBUTOR_ENABLED_CONTEXT_VALUE",
    "HeaderFlagContributor",
]
