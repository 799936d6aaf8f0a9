"""Module: add_string_operation.py

Author: Michael Economou
Date: 2026-01-06

Adds fixed text before and/or after a name.
"""

from typing import Any

from bulkrename.operations.base_operation import BaseRenameOperation, coerce_str


class AddStringOperation(BaseRenameOperation):
    """Prepend `prefix` and append `suffix` to the name."""

    OPERATION_TYPE = "add_string"
    DISPLAY_NAME = "Add Prefix or Suffix"
    MENU_ORDER = 2
    DESCRIPTION = "Add text to the start or end of the name"

    def __init__(self, prefix: str = "", suffix: str = "") -> None:
        self.prefix = prefix
        self.suffix = suffix

    def rename(self, text: str, position_index: int) -> str:
        return f"{self.prefix}{text}{self.suffix}"

    def get_data(self) -> dict[str, Any]:
        return {"type": self.OPERATION_TYPE, "prefix": self.prefix, "suffix": self.suffix}

    def set_data(self, data: dict[str, Any]) -> None:
        self.prefix = coerce_str(data.get("prefix", ""))
        self.suffix = coerce_str(data.get("suffix", ""))
