"""press-graph: Relay connections and batch loading over WordPress-shaped content."""

__version__ = "0.1.0"
