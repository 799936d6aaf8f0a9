"""Module: trim_characters_operation.py

Author: Michael Economou
Date: 2026-01-06

Removes a fixed number of characters from the start and end of a name.
"""

from typing import Any

from bulkrename.operations.base_operation import BaseRenameOperation, coerce_int
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class TrimCharactersOperation(BaseRenameOperation):
    """Drop `front` characters from the start and `back` characters from the end.

    Trimming more characters than the name has leaves an empty name.
    """

    OPERATION_TYPE = "trim_characters"
    DISPLAY_NAME = "Trim Characters"
    MENU_ORDER = 5
    DESCRIPTION = "Remove characters from the start or end"

    def __init__(self, front: int = 0, back: int = 0) -> None:
        self.front = front
        self.back = back

    def rename(self, text: str, position_index: int) -> str:
        if not isinstance(self.front, int) or not isinstance(self.back, int):
            logger.warning(
                "[TrimCharactersOperation] Non-integer counts (%r, %r), leaving name unchanged",
                self.front,
                self.back,
            )
            return text
        if self.front < 0 or self.back < 0:
            logger.warning(
                "[TrimCharactersOperation] Negative counts (%d, %d), leaving name unchanged",
                self.front,
                self.back,
            )
            return text

        end = len(text) - self.back
        return text[self.front : max(end, self.front)]

    def get_data(self) -> dict[str, Any]:
        return {"type": self.OPERATION_TYPE, "front": self.front, "back": self.back}

    def set_data(self, data: dict[str, Any]) -> None:
        self.front = coerce_int(data.get("front", 0), 0)
        self.back = coerce_int(data.get("back", 0), 0)
