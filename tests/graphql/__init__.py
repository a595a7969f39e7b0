"""GraphQL schema test suite."""
