"""Resolver package for GraphQL schema.

Query resolvers delegate straight to the repositories. Mutation resolvers
compose several repository calls; any failure inside them is logged and the
mutation resolves to null instead of a GraphQL error.
"""

# Intentionally empty; functions are defined in sibling modules.
