"""bulkrename.core.preview_validator

Validates rename previews before a host commits them: flags results that are
not usable as filenames, results that collide with an earlier result, and
names the chain left unchanged.

Author: Michael Economou
Date: 2026-01-07
"""

from collections.abc import Iterable

from bulkrename.core.data_classes import ValidationItem, ValidationResult
from bulkrename.models.rename_preview import BulkRenamePreview
from bulkrename.utils.logging.logger_factory import get_cached_logger
from bulkrename.utils.naming.filename_validator import (
    get_validation_error_message,
    validate_filename_part,
)

logger = get_cached_logger(__name__)


class PreviewValidator:
    """Validate previews and detect duplicate results.

    With `case_sensitive=False` (the default, matching Windows and macOS file
    systems) "A" and "a" count as the same name.
    """

    def __init__(self, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive

    def validate(self, previews: Iterable[BulkRenamePreview]) -> ValidationResult:
        """Return a ValidationResult with one item per preview."""
        items: list[ValidationItem] = []
        duplicates: set[str] = set()
        seen: set[str] = set()

        for preview in previews:
            is_valid, _cleaned = validate_filename_part(preview.result)
            error = "" if is_valid else get_validation_error_message(preview.result)

            key = preview.result if self.case_sensitive else preview.result.casefold()
            is_duplicate = key in seen
            if is_duplicate:
                duplicates.add(preview.result)
            else:
                seen.add(key)

            items.append(
                ValidationItem(
                    old_name=preview.original,
                    new_name=preview.result,
                    is_valid=is_valid,
                    is_duplicate=is_duplicate,
                    is_unchanged=not preview.has_changes,
                    error_message=error,
                )
            )

        result = ValidationResult(items, duplicates)
        if result.has_errors:
            logger.info(
                "[PreviewValidator] %d invalid, %d duplicate of %d previews",
                result.invalid_count,
                result.duplicate_count,
                len(items),
            )
        return result
