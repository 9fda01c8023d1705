"""context_getter() — factory producing Strawberry-compatible context getters."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import HTTPConnection

from graphql_context_contributor.context import GraphQLContext
from graphql_context_contributor.exceptions import ContributorError
from graphql_context_contributor.pipeline import ContributorPipeline


def context_getter(
    pipeline: ContributorPipeline,
) -> Callable[..., Awaitable[GraphQLContext]]:
    """Return a FastAPI dependency for ``GraphQLRouter(context_getter=...)``.

    Request-body extensions are not parsed yet when the context is built, so
    contributors receive ``extensions=None`` here.
    """
    pipeline.resolve()

    if pipeline.debug:
        return _make_debug_getter(pipeline)
    return _make_getter(pipeline)


def _make_getter(
    pipeline: ContributorPipeline,
) -> Callable[..., Awaitable[GraphQLContext]]:
    async def get_context(connection: HTTPConnection) -> GraphQLContext:
        try:
            values = pipeline.build_context(request=connection)
        except ContributorError as exc:
            raise HTTPException(status_code=500, detail=exc.detail) from exc
        return GraphQLContext(values)

    return get_context


def _make_debug_getter(
    pipeline: ContributorPipeline,
) -> Callable[..., Awaitable[GraphQLContext]]:
    async def get_context(connection: HTTPConnection) -> GraphQLContext:
        try:
            values, trace = pipeline.build_context_traced(request=connection)
        except ContributorError as exc:
            raise HTTPException(status_code=500, detail=exc.detail) from exc
        return GraphQLContext(values, trace=trace)

    return get_context
