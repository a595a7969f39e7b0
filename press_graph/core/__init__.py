"""Core domain layer: settings, exceptions, models, pagination primitives."""
