"""Module: replace_name_operation.py

Author: Michael Economou
Date: 2026-01-06

Replaces the whole name with new text, usually followed by Enumerate.
"""

from typing import Any

from bulkrename.operations.base_operation import BaseRenameOperation, coerce_str


class ReplaceNameOperation(BaseRenameOperation):
    """Replace the entire name with `new_name`. An empty `new_name` keeps the name."""

    OPERATION_TYPE = "replace_name"
    DISPLAY_NAME = "Replace Name"
    MENU_ORDER = 7
    DESCRIPTION = "Replace the whole name"

    def __init__(self, new_name: str = "") -> None:
        self.new_name = new_name

    def rename(self, text: str, position_index: int) -> str:
        return self.new_name or text

    def get_data(self) -> dict[str, Any]:
        return {"type": self.OPERATION_TYPE, "new_name": self.new_name}

    def set_data(self, data: dict[str, Any]) -> None:
        self.new_name = coerce_str(data.get("new_name", ""))
