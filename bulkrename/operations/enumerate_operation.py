"""Module: enumerate_operation.py

Author: Michael Economou
Date: 2026-01-06

Appends (or prepends) a sequential number derived from the name's position
in the batch.
"""

from typing import Any

from bulkrename.config import (
    ENUMERATE_DEFAULT_INCREMENT,
    ENUMERATE_DEFAULT_PADDING,
    ENUMERATE_DEFAULT_START,
)
from bulkrename.operations.base_operation import BaseRenameOperation, coerce_int, coerce_str
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class EnumerateOperation(BaseRenameOperation):
    """Add the count `start + position_index * increment` to the name.

    The count is zero-padded to `padding` digits and joined to the name with
    `separator`. Because the count comes from the batch index, the n-th name
    always gets the same number no matter where this operation sits in the
    chain.
    """

    OPERATION_TYPE = "enumerate"
    DISPLAY_NAME = "Enumerate"
    MENU_ORDER = 3
    DESCRIPTION = "Number names by their position in the batch"

    def __init__(
        self,
        start: int = ENUMERATE_DEFAULT_START,
        increment: int = ENUMERATE_DEFAULT_INCREMENT,
        padding: int = ENUMERATE_DEFAULT_PADDING,
        separator: str = "",
        prepend: bool = False,
    ) -> None:
        self.start = start
        self.increment = increment
        self.padding = padding
        self.separator = separator
        self.prepend = prepend

    def format_count(self, position_index: int) -> str:
        """Return the padded count for `position_index`.

        Raises:
            ValueError: padding is negative.
            TypeError: start, increment or padding is not an integer.

        """
        if self.padding < 0:
            raise ValueError(f"padding must not be negative, got {self.padding}")
        value = int(self.start) + position_index * int(self.increment)
        return f"{value:0{int(self.padding)}d}"

    def rename(self, text: str, position_index: int) -> str:
        try:
            count = self.format_count(position_index)
        except (TypeError, ValueError) as e:
            logger.warning("[EnumerateOperation] Invalid counter settings, leaving name unchanged: %s", e)
            return text

        logger.debug(
            "[EnumerateOperation] index: %d, count: %s",
            position_index,
            count,
            extra={"dev_only": True},
        )
        if self.prepend:
            return f"{count}{self.separator}{text}"
        return f"{text}{self.separator}{count}"

    def get_data(self) -> dict[str, Any]:
        return {
            "type": self.OPERATION_TYPE,
            "start": self.start,
            "increment": self.increment,
            "padding": self.padding,
            "separator": self.separator,
            "prepend": self.prepend,
        }

    def set_data(self, data: dict[str, Any]) -> None:
        self.start = coerce_int(data.get("start", ENUMERATE_DEFAULT_START), ENUMERATE_DEFAULT_START)
        self.increment = coerce_int(
            data.get("increment", ENUMERATE_DEFAULT_INCREMENT), ENUMERATE_DEFAULT_INCREMENT
        )
        self.padding = coerce_int(
            data.get("padding", ENUMERATE_DEFAULT_PADDING), ENUMERATE_DEFAULT_PADDING
        )
        self.separator = coerce_str(data.get("separator", ""))
        self.prepend = bool(data.get("prepend", False))
