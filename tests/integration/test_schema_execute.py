"""Integration tests for contexts built outside HTTP and passed to schema.execute."""

from __future__ import annotations

from typing import Any

import strawberry
from strawberry.types import Info

from graphql_context_contributor.context import GraphQLContext
from graphql_context_contributor.contributors.header import HeaderFlagContributor
from graphql_context_contributor.pipeline import ContributorPipeline


@strawberry.type
class Query:
    @strawberry.field
    def contributor_enabled(self, info: Info[GraphQLContext, Any]) -> bool:
        return info.context.contributor_enabled

    @strawberry.field
    def header(self, info: Info[GraphQLContext, Any], name: str) -> str | None:
        return info.context.get_http_request_header(name)


schema = strawberry.Schema(Query)


class TestSchemaExecute:
    async def test_context_without_request(self) -> None:
        pipeline = ContributorPipeline(HeaderFlagContributor())
        context = GraphQLContext(pipeline.build_context())
        result = await schema.execute(
            '{ contributorEnabled header(name: "context-contributor-header") }',
            context_value=context,
        )
        assert result.errors is None
        assert result.data == {"contributorEnabled": False, "header": None}

    async def test_context_with_request(self, make_request: Any) -> None:
        request = make_request(headers={"context-contributor-header": "enabled"})
        pipeline = ContributorPipeline(HeaderFlagContributor())
        context = GraphQLContext(pipeline.build_context(request))
        context.request = request
        result = await schema.execute(
            '{ contributorEnabled header(name: "Context-Contributor-Header") }',
            context_value=context,
        )
        assert result.errors is None
        assert result.data == {"contributorEnabled": True, "header": "enabled"}
