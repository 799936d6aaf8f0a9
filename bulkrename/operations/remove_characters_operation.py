"""Module: remove_characters_operation.py

Author: Michael Economou
Date: 2026-01-05

Removes every occurrence of a set of characters from a name.

The active character set comes from a preset slot: the shared Symbols or
Numbers presets, or the operation's own Custom slot. Matching is
case-insensitive unless the preset says otherwise.
"""

from __future__ import annotations

import re
from typing import Any

from bulkrename.models.character_preset import CharacterPreset, PresetOption
from bulkrename.operations.base_operation import BaseRenameOperation, coerce_str
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class RemoveCharactersOperation(BaseRenameOperation):
    """Delete each character of the active preset wherever it appears in the name.

    Example (Numbers preset): "Hero_01_v2" -> "Hero__v"
    """

    OPERATION_TYPE = "remove_characters"
    DISPLAY_NAME = "Remove Characters"
    MENU_ORDER = 6
    DESCRIPTION = "Remove symbols, digits or a custom set of characters"

    def __init__(self) -> None:
        self._selected_option = PresetOption.SYMBOLS
        self._custom_preset = CharacterPreset()

    @property
    def selected_option(self) -> PresetOption:
        return self._selected_option

    @property
    def custom_preset(self) -> CharacterPreset:
        return self._custom_preset

    @property
    def current_preset(self) -> CharacterPreset:
        """The preset `rename` matches against."""
        return self._selected_option.standard_preset or self._custom_preset

    def select_preset(self, option: PresetOption | str) -> None:
        """Switch to a preset slot. Selecting Custom keeps the slot's current value."""
        self._selected_option = PresetOption(option)

    def set_custom_preset(self, characters: str, case_sensitive: bool = False) -> None:
        """Store new characters in the Custom slot and make it the active preset."""
        self._custom_preset = CharacterPreset(coerce_str(characters), bool(case_sensitive))
        self._selected_option = PresetOption.CUSTOM

    def clone(self) -> RemoveCharactersOperation:
        copied = RemoveCharactersOperation()
        copied._selected_option = self._selected_option
        copied._custom_preset = CharacterPreset(
            self._custom_preset.characters, self._custom_preset.case_sensitive
        )
        return copied

    def rename(self, text: str, position_index: int) -> str:
        preset = self.current_preset
        if preset.is_empty:
            return text

        try:
            pattern = self.build_pattern(preset)
        except (re.error, TypeError, ValueError) as e:
            logger.warning(
                "[RemoveCharactersOperation] Cannot match characters %r, leaving name unchanged: %s",
                preset.characters,
                e,
            )
            return text

        return pattern.sub("", text)

    @staticmethod
    def build_pattern(preset: CharacterPreset) -> re.Pattern[str]:
        """Compile a character class matching any single character of `preset`."""
        flags = 0 if preset.case_sensitive else re.IGNORECASE
        return re.compile(f"[{re.escape(preset.characters)}]", flags)

    def get_data(self) -> dict[str, Any]:
        return {
            "type": self.OPERATION_TYPE,
            "preset": self._selected_option.value,
            "characters": self._custom_preset.characters,
            "case_sensitive": self._custom_preset.case_sensitive,
        }

    def set_data(self, data: dict[str, Any]) -> None:
        self._custom_preset = CharacterPreset(
            coerce_str(data.get("characters", "")), bool(data.get("case_sensitive", False))
        )
        try:
            self._selected_option = PresetOption(data.get("preset", PresetOption.SYMBOLS.value))
        except ValueError:
            logger.warning(
                "[RemoveCharactersOperation] Unknown preset %r, using Symbols", data.get("preset")
            )
            self._selected_option = PresetOption.SYMBOLS
