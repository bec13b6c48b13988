"""Resolver functions referenced by the GraphQL query types."""
