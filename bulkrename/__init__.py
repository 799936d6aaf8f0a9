"""bulkrename: composable rename operations and batch rename previews.

Configure an ordered chain of operations on a BulkRenamer, hand it a batch of
names, and get back one (original, result) preview per name:

    renamer = BulkRenamer()
    renamer.set_operations([RemoveCharactersOperation(), EnumerateOperation(start=1)])
    previews = renamer.get_rename_previews(["hero!", "villain?"])

Applying the previews to files or other storage is left to the caller.
"""

from bulkrename.config import APP_VERSION as __version__
from bulkrename.core import (
    BulkRenameError,
    BulkRenamer,
    OperationRegistry,
    PresetNotFoundError,
    PreviewValidator,
    UnknownOperationError,
    ValidationResult,
)
from bulkrename.models import (
    NUMBERS,
    SYMBOLS,
    BulkRenamePreview,
    CaseMode,
    CharacterPreset,
    PresetOption,
)
from bulkrename.operations import (
    AddStringOperation,
    BaseRenameOperation,
    ChangeCaseOperation,
    EnumerateOperation,
    RemoveCharactersOperation,
    ReplaceNameOperation,
    ReplaceStringOperation,
    TrimCharactersOperation,
)
from bulkrename.utils.shared.json_preset_store import JSONPresetStore

__all__ = [
    "NUMBERS",
    "SYMBOLS",
    "AddStringOperation",
    "BaseRenameOperation",
    "BulkRenameError",
    "BulkRenamePreview",
    "BulkRenamer",
    "CaseMode",
    "ChangeCaseOperation",
    "CharacterPreset",
    "EnumerateOperation",
    "JSONPresetStore",
    "OperationRegistry",
    "PresetNotFoundError",
    "PresetOption",
    "PreviewValidator",
    "RemoveCharactersOperation",
    "ReplaceNameOperation",
    "ReplaceStringOperation",
    "TrimCharactersOperation",
    "UnknownOperationError",
    "ValidationResult",
    "__version__",
]
