"""Module: change_case_operation.py

Author: Michael Economou
Date: 2025-05-27

Applies case and separator transformations to a name.
"""

from typing import Any

from bulkrename.models.case_mode import CaseMode
from bulkrename.operations.base_operation import BaseRenameOperation
from bulkrename.utils.logging.logger_factory import get_cached_logger
from bulkrename.utils.naming.transform_utils import apply_transform, change_first_character

logger = get_cached_logger(__name__)


class ChangeCaseOperation(BaseRenameOperation):
    """Change the casing or word separators of the whole name.

    `first_character_only` limits lower/UPPER to the first character, leaving
    the rest of the name as it was.
    """

    OPERATION_TYPE = "change_case"
    DISPLAY_NAME = "Change Case"
    MENU_ORDER = 4
    DESCRIPTION = "Apply case and separator transformations"

    def __init__(self, mode: CaseMode | str = CaseMode.LOWER, first_character_only: bool = False):
        self.mode = mode
        self.first_character_only = first_character_only

    @property
    def mode(self) -> CaseMode:
        return self._mode

    @mode.setter
    def mode(self, value: CaseMode | str) -> None:
        """Accept a CaseMode or its string value. Unknown values fall back to lower."""
        try:
            self._mode = CaseMode(value)
        except ValueError:
            logger.warning("[ChangeCaseOperation] Unknown case mode %r, using lower", value)
            self._mode = CaseMode.LOWER

    def rename(self, text: str, position_index: int) -> str:
        if self.mode == CaseMode.ORIGINAL or not text:
            return text

        if self.first_character_only and self.mode.supports_first_character_only:
            return change_first_character(text, to_upper=self.mode == CaseMode.UPPER)

        result = apply_transform(text, self.mode.value)
        if not result.strip():
            logger.warning("[ChangeCaseOperation] Empty output, fallback to original: %s", text)
            return text
        return result

    def get_data(self) -> dict[str, Any]:
        return {
            "type": self.OPERATION_TYPE,
            "mode": self.mode.value,
            "first_character_only": self.first_character_only,
        }

    def set_data(self, data: dict[str, Any]) -> None:
        self.mode = data.get("mode", CaseMode.LOWER.value)
        self.first_character_only = bool(data.get("first_character_only", False))
