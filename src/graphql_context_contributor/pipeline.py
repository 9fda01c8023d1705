"""ContributorPipeline — ordered container and runner for ContextContributors."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from graphql_context_contributor._types import Extensions, InboundRequest
from graphql_context_contributor.context import ContextBuilder
from graphql_context_contributor.contributor import ContextContributor
from graphql_context_contributor.exceptions import (
    ContributorError,
    ContributorException,
)
from graphql_context_contributor.trace import ContributionTrace, TraceEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPipeline:
    """Immutable, pre-computed execution plan."""

    contributors: tuple[ContextContributor, ...]
    debug: bool = False


class ContributorPipeline:
    """Ordered container of ContextContributor instances."""

    def __init__(
        self,
        *contributors: ContextContributor | ContributorPipeline,
        debug: bool = False,
    ) -> None:
        self._items: list[ContextContributor | ContributorPipeline] = list(
            contributors
        )
        self._debug = debug
        self._resolved: ResolvedPipeline | None = None

    @property
    def debug(self) -> bool:
        return self._debug

    def add(
        self, *contributors: ContextContributor | ContributorPipeline
    ) -> ContributorPipeline:
        self._items.extend(contributors)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPipeline:
        if self._resolved is not None:
            return self._resolved

        flat: list[ContextContributor] = []
        self._flatten(self._items, flat)

        self._resolved = ResolvedPipeline(
            contributors=tuple(flat),
            debug=self._debug,
        )
        return self._resolved

    def contribute(
        self,
        builder: ContextBuilder,
        extensions: Extensions | None = None,
        request: InboundRequest | None = None,
    ) -> None:
        """Run every contributor against ``builder`` in registration order."""
        resolved = self.resolve()
        for contributor in resolved.contributors:
            _run_contributor(contributor, builder, extensions, request)
        logger.debug(
            "Ran %d context contributors, %d entries",
            len(resolved.contributors),
            len(builder),
        )

    def build_context(
        self,
        request: InboundRequest | None = None,
        extensions: Extensions | None = None,
    ) -> Mapping[str, Any]:
        builder = ContextBuilder()
        self.contribute(builder, extensions, request)
        return builder.build()

    def build_context_traced(
        self,
        request: InboundRequest | None = None,
        extensions: Extensions | None = None,
    ) -> tuple[Mapping[str, Any], ContributionTrace]:
        """Like build_context, recording per-contributor timings.

        On failure the trace is attached to the raised exception as
        ``trace``.
        """
        builder = ContextBuilder()
        trace = ContributionTrace()
        pipeline_start = time.perf_counter()

        for contributor in self.resolve().contributors:
            before = len(builder)
            start = time.perf_counter()
            try:
                _run_contributor(contributor, builder, extensions, request)
            except ContributorException as exc:
                cause = exc.cause if isinstance(exc, ContributorError) else None
                trace.entries.append(
                    TraceEntry(
                        contributor_name=type(contributor).__name__,
                        duration_ms=(time.perf_counter() - start) * 1000,
                        outcome="FAILED",
                        keys_added=len(builder) - before,
                        reason=str(cause if cause is not None else exc),
                    )
                )
                trace.total_duration_ms = (time.perf_counter() - pipeline_start) * 1000
                trace.outcome = "ERROR"
                trace.error = exc
                exc.trace = trace
                raise

            trace.entries.append(
                TraceEntry(
                    contributor_name=type(contributor).__name__,
                    duration_ms=(time.perf_counter() - start) * 1000,
                    outcome="OK",
                    keys_added=len(builder) - before,
                )
            )

        trace.total_duration_ms = (time.perf_counter() - pipeline_start) * 1000
        return builder.build(), trace

    @staticmethod
    def _flatten(
        items: list[ContextContributor | ContributorPipeline],
        out: list[ContextContributor],
    ) -> None:
        for item in items:
            if isinstance(item, ContributorPipeline):
                ContributorPipeline._flatten(item._items, out)
            elif isinstance(item, ContextContributor):
                out.append(item)
            else:
                raise TypeError(
                    f"Expected ContextContributor or ContributorPipeline, got {item!r}"
                )


def _run_contributor(
    contributor: ContextContributor,
    builder: ContextBuilder,
    extensions: Extensions | None,
    request: InboundRequest | None,
) -> None:
    try:
        contributor.contribute(builder, extensions, request)
    except ContributorException:
        raise
    except Exception as exc:
        logger.exception("Context contributor %s failed", type(contributor).__name__)
        raise ContributorError(
            "Internal context error", contributor=contributor, cause=exc
        ) from exc
