"""Module: exceptions.py

Author: Michael Economou
Date: 2026-01-05

Exceptions raised by the registry and preset store. Rename operations and
BulkRenamer never raise these; invalid operation configuration degrades to
an identity rename instead.
"""


class BulkRenameError(Exception):
    """Base class for bulkrename errors."""


class UnknownOperationError(BulkRenameError, KeyError):
    """No operation type is registered under the requested id."""

    def __init__(self, operation_type: str):
        super().__init__(operation_type)
        self.operation_type = operation_type

    def __str__(self) -> str:
        return f"Unknown rename operation type: {self.operation_type!r}"


class PresetNotFoundError(BulkRenameError, KeyError):
    """No saved operation chain exists under the requested name."""

    def __init__(self, preset_name: str):
        super().__init__(preset_name)
        self.preset_name = preset_name

    def __str__(self) -> str:
        return f"No saved rename preset named {self.preset_name!r}"
