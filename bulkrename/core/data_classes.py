"""bulkrename.core.data_classes.

Data classes holding the validation results for a set of rename previews.

Author: Michael Economou
Date: 2026-01-07
"""

from dataclasses import dataclass, field


@dataclass
class ValidationItem:
    """Validation information for a single preview entry.

    Attributes:
        old_name: Original name.
        new_name: Name produced by the operation chain.
        is_valid: True when the new name passes filename validation.
        is_duplicate: True when an earlier preview already produced this name.
        is_unchanged: True when `old_name == new_name`.
        error_message: Human-readable validation error, empty when valid.

    """

    old_name: str
    new_name: str
    is_valid: bool
    is_duplicate: bool
    is_unchanged: bool
    error_message: str = ""


@dataclass
class ValidationResult:
    """Aggregate result of validating a set of previews.

    Attributes:
        items: One ValidationItem per preview, in preview order.
        duplicates: New names produced more than once.
        has_errors: True if any item failed validation (computed).
        all_unchanged: True if every item is unchanged (computed).
        unchanged_count: Number of unchanged items (computed).
        valid_count: Number of valid, changed, non-duplicate items (computed).
        invalid_count: Number of invalid items (computed).
        duplicate_count: Number of duplicate items (computed).

    """

    items: list[ValidationItem]
    duplicates: set[str] = field(default_factory=set)
    has_errors: bool = False
    all_unchanged: bool = False
    unchanged_count: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    duplicate_count: int = 0

    def __post_init__(self) -> None:
        """Compute derived counts and flags from items."""
        self.invalid_count = sum(1 for item in self.items if not item.is_valid)
        self.duplicate_count = sum(1 for item in self.items if item.is_duplicate)
        self.unchanged_count = sum(1 for item in self.items if item.is_unchanged)
        self.valid_count = sum(
            1
            for item in self.items
            if item.is_valid and not item.is_unchanged and not item.is_duplicate
        )
        self.has_errors = self.invalid_count > 0 or self.duplicate_count > 0
        self.all_unchanged = bool(self.items) and self.unchanged_count == len(self.items)

    @property
    def can_commit(self) -> bool:
        """True when at least one name changes and nothing is invalid or duplicated."""
        return not self.has_errors and self.valid_count > 0
