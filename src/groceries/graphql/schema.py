"""
Main GraphQL schema definition using Strawberry
"""

import traceback
from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionResult

from ..logging import get_logger
from ..repositories import Repositories
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def format_graphql_error(error: GraphQLError, include_stack: bool = True) -> dict[str, Any]:
    """Format an execution error as ``{message, locations, path, stack}``.

    The stack is the traceback of the exception raised inside a resolver when
    there is one, otherwise of the GraphQL error itself.
    """
    formatted: dict[str, Any] = dict(error.formatted)
    formatted.setdefault("locations", [])

    if include_stack:
        exc = error.original_error or error
        formatted["stack"] = "".join(traceback.format_exception(exc)).rstrip()

    return formatted


class GroceriesGraphQLRouter(GraphQLRouter[dict[str, Any], None]):
    """GraphQL router that adds stack traces to error entries."""

    def __init__(self, *args: Any, include_error_stack: bool = True, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.include_error_stack = include_error_stack

    async def process_result(  # type: ignore[override]
        self, request: Request, result: ExecutionResult, *args: Any, **kwargs: Any
    ) -> dict[str, Any]:
        response = await super().process_result(request, result, *args, **kwargs)
        if result.errors:
            response["errors"] = [
                format_graphql_error(e, include_stack=self.include_error_stack)
                for e in result.errors
            ]
        return response


# Create the GraphQL router for FastAPI integration
def create_graphql_router(
    repositories: Repositories, include_error_stack: bool = True
) -> GroceriesGraphQLRouter:
    """Create a GraphQL router whose resolvers receive ``repositories`` via context."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "repositories": repositories,
        }

    return GroceriesGraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql",
        context_getter=get_context,
        include_error_stack=include_error_stack,
    )
