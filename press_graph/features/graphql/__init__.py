"""GraphQL feature: connection resolution, batch loading and the strawberry schema.

Import the router or schema from their modules:
    from press_graph.features.graphql.router import create_graphql_router
    from press_graph.features.graphql.schema import schema
"""
