"""Module: replace_string_operation.py

Author: Michael Economou
Date: 2026-01-06

Replaces occurrences of a search string, or of a regular expression, with
replacement text.
"""

from __future__ import annotations

import re
from typing import Any

from bulkrename.operations.base_operation import BaseRenameOperation, coerce_str
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class ReplaceStringOperation(BaseRenameOperation):
    """Replace every match of `search_string` with `replacement`.

    With `use_regex` the search string is a pattern and the replacement may use
    group references (\\1, \\g<name>). Without it both are taken literally.
    """

    OPERATION_TYPE = "replace_string"
    DISPLAY_NAME = "Replace String"
    MENU_ORDER = 1
    DESCRIPTION = "Replace text or a regular expression match"

    def __init__(
        self,
        search_string: str = "",
        replacement: str = "",
        use_regex: bool = False,
        case_sensitive: bool = False,
    ) -> None:
        self.search_string = search_string
        self.replacement = replacement
        self.use_regex = use_regex
        self.case_sensitive = case_sensitive

    def rename(self, text: str, position_index: int) -> str:
        if not self.search_string:
            return text

        pattern = self.search_string if self.use_regex else re.escape(self.search_string)
        flags = 0 if self.case_sensitive else re.IGNORECASE

        try:
            regex = re.compile(pattern, flags)
            if self.use_regex:
                return regex.sub(self.replacement, text)
            return regex.sub(lambda _m: self.replacement, text)
        except (re.error, TypeError) as e:
            logger.warning(
                "[ReplaceStringOperation] Invalid pattern %r, leaving name unchanged: %s",
                self.search_string,
                e,
            )
            return text

    def get_data(self) -> dict[str, Any]:
        return {
            "type": self.OPERATION_TYPE,
            "search_string": self.search_string,
            "replacement": self.replacement,
            "use_regex": self.use_regex,
            "case_sensitive": self.case_sensitive,
        }

    def set_data(self, data: dict[str, Any]) -> None:
        self.search_string = coerce_str(data.get("search_string", ""))
        self.replacement = coerce_str(data.get("replacement", ""))
        self.use_regex = bool(data.get("use_regex", False))
        self.case_sensitive = bool(data.get("case_sensitive", False))
