"""
Basic usage example of graphql-context-contributor.

Demonstrates:
- Registering the header contributor in a pipeline
- Plugging the pipeline into Strawberry's GraphQLRouter
- Reading the contributed marker entry from a resolver
"""

from typing import Any

import strawberry
from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from graphql_context_contributor import (
    CONTRIBUTOR_ENABLED_CONTEXT_KEY,
    ContributorPipeline,
    GraphQLContext,
    HeaderFlagContributor,
    context_getter,
)


@strawberry.type
class Query:
    @strawberry.field(description="Whether the context contributor matched.")
    def contributor_enabled(self, info: Info[GraphQLContext, Any]) -> bool:
        return info.context.contributor_enabled

    @strawberry.field(description="Raw marker value, if it was contributed.")
    def contributor_value(self, info: Info[GraphQLContext, Any]) -> str | None:
        return info.context.get(CONTRIBUTOR_ENABLED_CONTEXT_KEY)


pipeline = ContributorPipeline(HeaderFlagContributor())

schema = strawberry.Schema(Query)
graphql_router = GraphQLRouter(schema, context_getter=context_getter(pipeline))

app = FastAPI(title="Context Contributor Example")
app.include_router(graphql_router, prefix="/graphql")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -X POST -H "Content-Type: application/json" \
    #   -d '{"query": "{ contributorEnabled }"}' http://localhost:8000/graphql
    # curl -X POST -H "Content-Type: application/json" \
    #   -H "context-contributor-header: enabled" \
    #   -d '{"query": "{ contributorEnabled }"}' http://localhost:8000/graphql
