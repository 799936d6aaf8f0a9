"""Module: __init__.py

Author: Michael Economou
Date: 2026-01-07

Core package: the renamer, the operation registry and preview validation.
"""

from bulkrename.core.bulk_renamer import BulkRenamer
from bulkrename.core.data_classes import ValidationItem, ValidationResult
from bulkrename.core.exceptions import BulkRenameError, PresetNotFoundError, UnknownOperationError
from bulkrename.core.operation_registry import OperationDescriptor, OperationRegistry
from bulkrename.core.preview_validator import PreviewValidator

__all__ = [
    "BulkRenameError",
    "BulkRenamer",
    "OperationDescriptor",
    "OperationRegistry",
    "PresetNotFoundError",
    "PreviewValidator",
    "UnknownOperationError",
    "ValidationItem",
    "ValidationResult",
]
