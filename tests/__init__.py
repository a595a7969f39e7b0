"""press-graph test suite."""
