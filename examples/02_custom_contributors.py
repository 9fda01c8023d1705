"""
Custom contributor examples.

Demonstrates:
- Writing a ContextContributor of your own
- Composing pipelines and running them in debug mode
- Building a context outside HTTP, e.g. for schema.execute in scripts
"""

import asyncio
import logging
from typing import Any

import strawberry
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from graphql_context_contributor import (
    ContextBuilder,
    ContextContributor,
    ContributorPipeline,
    Extensions,
    GraphQLContext,
    HeaderFlagContributor,
    InboundRequest,
    context_getter,
)

logging.basicConfig(level=logging.DEBUG)


# ========== Custom Request ID Contributor ==========


class RequestIDContributor(ContextContributor):
    """Copies the client-supplied request ID into the context."""

    def contribute(
        self,
        builder: ContextBuilder,
        extensions: Extensions | None = None,
        request: InboundRequest | None = None,
    ) -> None:
        if request is None:
            return
        request_id = request.headers.get("X-Request-ID")
        if request_id:
            builder.put("requestId", request_id)


# ========== Static Contributor ==========


class ServiceNameContributor(ContextContributor):
    """Adds a fixed service name, with or without a request."""

    def __init__(self, name: str) -> None:
        self._name = name

    def contribute(
        self,
        builder: ContextBuilder,
        extensions: Extensions | None = None,
        request: InboundRequest | None = None,
    ) -> None:
        builder.put("service", self._name)


@strawberry.type
class Query:
    @strawberry.field
    def request_id(self, info: Info[GraphQLContext, Any]) -> str | None:
        return info.context.get("requestId")

    @strawberry.field
    def service(self, info: Info[GraphQLContext, Any]) -> str | None:
        return info.context.get("service")

    @strawberry.field
    def contributor_enabled(self, info: Info[GraphQLContext, Any]) -> bool:
        return info.context.contributor_enabled

    @strawberry.field(description="Contributors that ran, in debug mode only.")
    def trace(self, info: Info[GraphQLContext, Any]) -> list[str]:
        if info.context.trace is None:
            return []
        return [
            f"{e.contributor_name}: {e.outcome} (+{e.keys_added})"
            for e in info.context.trace.entries
        ]


# Base pipeline shared by every router
base_pipeline = ContributorPipeline(ServiceNameContributor("catalog"))

# Nested pipelines are flattened in registration order
debug_pipeline = ContributorPipeline(
    base_pipeline,
    RequestIDContributor(),
    HeaderFlagContributor(),
    debug=True,
)

schema = strawberry.Schema(Query)

app = FastAPI(title="Custom Contributors Examples")
app.include_router(
    GraphQLRouter(schema, context_getter=context_getter(debug_pipeline)),
    prefix="/graphql",
)


async def run_without_http() -> None:
    """Execute a query with a context built without any request."""
    context = GraphQLContext(base_pipeline.build_context())
    result = await schema.execute("{ service contributorEnabled }", context_value=context)
    print(result.data)  # {'service': 'catalog', 'contributorEnabled': False}


if __name__ == "__main__":
    import uvicorn

    asyncio.run(run_without_http())
    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -X POST -H "Content-Type: application/json" \
    #   -H "X-Request-ID: req-42" -H "context-contributor-header: enabled" \
    #   -d '{"query": "{ requestId service contributorEnabled trace }"}' \
    #   http://localhost:8000/graphql
