"""Module: rename_preview.py

Author: Michael Economou
Date: 2026-01-05

Preview value produced by BulkRenamer for each input name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BulkRenamePreview:
    """Original name and the name the operation chain produced for it.

    Attributes:
        original: Name as supplied by the caller.
        result: Name after every operation in the chain was applied.

    """

    original: str
    result: str

    @property
    def has_changes(self) -> bool:
        """True if the chain changed the name."""
        return self.original != self.result
