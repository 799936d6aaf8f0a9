"""Module: bulk_renamer.py

Author: Michael Economou
Date: 2026-01-07

BulkRenamer applies an ordered chain of rename operations to a batch of
names and reports the result for each one as a BulkRenamePreview.

Each name is processed independently: the chain is folded left to right over
the name, and every operation in that pass receives the name's index within
the batch. Nothing is carried over from one name to the next, so previews are
deterministic and can be computed in any order. Storage is never touched;
committing the previews is the caller's job.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from bulkrename.models.rename_preview import BulkRenamePreview
from bulkrename.operations.base_operation import BaseRenameOperation
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BulkRenamer:
    """Holds the operation chain and produces rename previews.

    The chain is owned by the renamer: `set_operations` copies the sequence it
    is given. Operations themselves are not copied; use `clone()` on them when
    two renamers need independent configurations.
    """

    def __init__(self, operations: Iterable[BaseRenameOperation] | None = None) -> None:
        self._operations: list[BaseRenameOperation] = []
        if operations is not None:
            self.set_operations(operations)

    @property
    def operations(self) -> tuple[BaseRenameOperation, ...]:
        """Snapshot of the chain in application order."""
        return tuple(self._operations)

    def set_operation(self, operation: BaseRenameOperation) -> None:
        """Replace the whole chain with the single `operation`."""
        self.set_operations([operation])

    def set_operations(self, operations: Iterable[BaseRenameOperation]) -> None:
        """Replace the whole chain with `operations`, keeping their order.

        An empty chain is valid and leaves every name unchanged.
        """
        self._operations = list(operations)
        logger.debug(
            "[BulkRenamer] Chain set: %s",
            [op.display_name for op in self._operations],
            extra={"dev_only": True},
        )

    def get_renamed_name(self, name: str, position_index: int) -> str:
        """Apply the chain to one name, passing `position_index` to every operation."""
        current = name
        for operation in self._operations:
            current = operation.rename(current, position_index)
        return current

    def get_rename_previews(self, names: Sequence[str]) -> list[BulkRenamePreview]:
        """Return one preview per name, in input order."""
        logger.debug(
            "[BulkRenamer] Previewing %d names through %d operations",
            len(names),
            len(self._operations),
            extra={"dev_only": True},
        )
        return [
            BulkRenamePreview(name, self.get_renamed_name(name, index))
            for index, name in enumerate(names)
        ]
