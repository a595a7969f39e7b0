"""Helpers for inspecting the fields selected under the current field."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from strawberry.types.nodes import SelectedField

if TYPE_CHECKING:
    from strawberry.types import Info


def _selected(selections: list[Any], name: str) -> bool:
    for selection in selections:
        if isinstance(selection, SelectedField):
            if selection.name == name:
                return True
        # Fragment spreads and inline fragments nest their own selections
        elif _selected(selection.selections, name):
            return True
    return False


def is_field_selected(info: Info, name: str) -> bool:
    """Whether ``name`` is selected directly under the field being resolved.

    Example:
        page_info_selected = is_field_selected(info, "pageInfo")
    """
    return any(_selected(field.selections, name) for field in info.selected_fields)


__all__ = ["is_field_selected"]
