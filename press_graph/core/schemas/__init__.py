"""Shared pydantic schemas."""

from .auth import ROLE_CAPABILITIES, Requester, capabilities_for_roles

__all__ = ["ROLE_CAPABILITIES", "Requester", "capabilities_for_roles"]
