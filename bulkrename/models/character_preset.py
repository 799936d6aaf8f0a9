"""Module: character_preset.py

Author: Michael Economou
Date: 2026-01-05

Character presets used by RemoveCharactersOperation.

A preset is a value: it is never mutated in place. Operations that expose a
"custom" slot replace the slot with a new CharacterPreset, so two operations
can never observe each other's edits through a shared preset object.
"""

from dataclasses import dataclass
from enum import Enum

from bulkrename.config import NUMBER_CHARACTERS, SYMBOL_CHARACTERS


@dataclass(frozen=True)
class CharacterPreset:
    """A set of characters plus the case sensitivity used to match them."""

    characters: str = ""
    case_sensitive: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.characters


SYMBOLS = CharacterPreset(SYMBOL_CHARACTERS, False)
NUMBERS = CharacterPreset(NUMBER_CHARACTERS, False)


class PresetOption(str, Enum):
    """Selectable preset slots of a character operation."""

    SYMBOLS = "symbols"
    NUMBERS = "numbers"
    CUSTOM = "custom"

    def __str__(self) -> str:
        """Return the string value of the option."""
        return self.value

    @property
    def display_name(self) -> str:
        """Return a user-friendly display name."""
        return {
            PresetOption.SYMBOLS: "Symbols",
            PresetOption.NUMBERS: "Numbers",
            PresetOption.CUSTOM: "Custom",
        }[self]

    @property
    def standard_preset(self) -> CharacterPreset | None:
        """Return the shared standard preset, or None for the custom slot."""
        return {
            PresetOption.SYMBOLS: SYMBOLS,
            PresetOption.NUMBERS: NUMBERS,
            PresetOption.CUSTOM: None,
        }[self]
