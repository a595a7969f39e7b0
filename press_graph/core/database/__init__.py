"""Core database building blocks (declarative base, mixins)."""

from .base import NAMING_CONVENTION, Base, IntegerPKMixin

__all__ = ["NAMING_CONVENTION", "Base", "IntegerPKMixin"]
