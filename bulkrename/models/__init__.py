"""Data models for bulkrename.

This package contains:
- CharacterPreset / PresetOption: character sets used by character operations
- BulkRenamePreview: (original, result) pair produced by the renamer
- CaseMode: case and separator modes for ChangeCaseOperation
"""

from bulkrename.models.case_mode import CaseMode
from bulkrename.models.character_preset import NUMBERS, SYMBOLS, CharacterPreset, PresetOption
from bulkrename.models.rename_preview import BulkRenamePreview

__all__ = [
    "NUMBERS",
    "SYMBOLS",
    "BulkRenamePreview",
    "CaseMode",
    "CharacterPreset",
    "PresetOption",
]
