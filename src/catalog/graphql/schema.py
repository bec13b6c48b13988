"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Depends, Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..database.connection import get_db_session
from ..logging import get_logger, set_request_context
from ..products import ProductRepository, ProductService
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Ensures all type references resolve so a host fails fast instead of
    serving a broken endpoint.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def get_context(
    request: Request, session: AsyncSession = Depends(get_db_session)
) -> dict[str, Any]:
    """Build the per-request resolver context around one database session."""
    set_request_context(request.headers.get("x-request-id"))
    return {
        "request": request,
        "product_service": ProductService(ProductRepository(session)),
    }


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
