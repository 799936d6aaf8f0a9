"""Module: case_mode.py

Author: Michael Economou
Date: 2026-01-05

Case and separator modes for ChangeCaseOperation.
"""

from enum import Enum


class CaseMode(str, Enum):
    """Case or separator transformation applied to a whole name.

    Values match the transform names understood by
    `bulkrename.utils.naming.transform_utils.apply_transform`.
    """

    ORIGINAL = "original"
    LOWER = "lower"
    UPPER = "UPPER"
    CAPITALIZE = "Capitalize"
    TITLE = "Title Case"
    CAMEL = "camelCase"
    PASCAL = "PascalCase"
    SNAKE = "snake_case"
    KEBAB = "kebab-case"
    SPACE = "space"

    def __str__(self) -> str:
        """Return the string value of the mode."""
        return self.value

    @property
    def supports_first_character_only(self) -> bool:
        """Only plain lower/upper casing can be limited to the first character."""
        return self in (CaseMode.LOWER, CaseMode.UPPER)
