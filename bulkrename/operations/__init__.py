"""Rename operations for bulkrename.

Each operation is a small, composable text transformation
`rename(text, position_index) -> text`:
- replace_string: Replace text or a regex match
- add_string: Prefix and suffix
- enumerate: Sequential numbering from the batch index
- change_case: Case and separator transforms
- trim_characters: Drop characters from either end
- remove_characters: Delete symbols, digits or a custom character set
- replace_name: Replace the whole name
"""

from bulkrename.operations.add_string_operation import AddStringOperation
from bulkrename.operations.base_operation import BaseRenameOperation
from bulkrename.operations.change_case_operation import ChangeCaseOperation
from bulkrename.operations.enumerate_operation import EnumerateOperation
from bulkrename.operations.remove_characters_operation import RemoveCharactersOperation
from bulkrename.operations.replace_name_operation import ReplaceNameOperation
from bulkrename.operations.replace_string_operation import ReplaceStringOperation
from bulkrename.operations.trim_characters_operation import TrimCharactersOperation

__all__ = [
    "AddStringOperation",
    "BaseRenameOperation",
    "ChangeCaseOperation",
    "EnumerateOperation",
    "RemoveCharactersOperation",
    "ReplaceNameOperation",
    "ReplaceStringOperation",
    "TrimCharactersOperation",
]
