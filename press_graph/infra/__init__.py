"""Infrastructure layer (database engine, logging)."""
