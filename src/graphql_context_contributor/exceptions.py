"""ContributorException hierarchy for context building failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphql_context_contributor.contributor import ContextContributor
    from graphql_context_contributor.trace import ContributionTrace


class ContributorException(Exception):
    """Base for all context contribution exceptions."""

    # Set by traced pipeline runs
    trace: ContributionTrace | None = None


class ContextFinalizedError(ContributorException):
    """Write attempted on a builder that has already been built."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Context already finalized, cannot put {key!r}")
        self.key = key


class ContributorError(ContributorException):
    """Engine-level error wrapping unexpected exceptions raised by a contributor."""

    def __init__(
        self,
        detail: str,
        *,
        contributor: ContextContributor | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.contributor = contributor
        self.cause = cause
