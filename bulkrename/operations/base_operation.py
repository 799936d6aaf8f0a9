"""Module: base_operation.py

Author: Michael Economou
Date: 2025-05-31

Base class for all rename operations.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any

from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class BaseRenameOperation(ABC):
    """A single text transformation in a rename chain.

    Subclasses implement `rename(text, position_index)` as a total function:
    invalid configuration must degrade to returning `text` unchanged, never
    raise. `position_index` is the zero-based index of the name within the
    batch being previewed; most operations ignore it.

    Class attributes describe the operation for menus and serialization:
    - OPERATION_TYPE: stable id used in serialized data
    - DISPLAY_NAME: label shown to users
    - MENU_ORDER: sort key for menus (lower sorts first)
    - DESCRIPTION: one-line summary
    """

    OPERATION_TYPE: str = ""
    DISPLAY_NAME: str = ""
    MENU_ORDER: int = 100
    DESCRIPTION: str = ""

    @property
    def display_name(self) -> str:
        return self.DISPLAY_NAME or self.__class__.__name__.replace("Operation", "")

    @property
    def menu_order(self) -> int:
        return self.MENU_ORDER

    @abstractmethod
    def rename(self, text: str, position_index: int) -> str:
        """Return the renamed text."""

    def clone(self) -> BaseRenameOperation:
        """Return an independent copy with the same configuration."""
        return copy.deepcopy(self)

    @abstractmethod
    def get_data(self) -> dict[str, Any]:
        """Return the configuration as a JSON-serializable dict with a 'type' key."""

    @abstractmethod
    def set_data(self, data: dict[str, Any]) -> None:
        """Apply configuration from a dict produced by `get_data`.

        Missing keys fall back to defaults.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.get_data()!r})"


def coerce_int(value: Any, default: int) -> int:
    """Convert `value` to int, returning `default` for values that don't convert."""
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("[BaseRenameOperation] Ignoring non-integer value: %r", value)
        return default


def coerce_str(value: Any, default: str = "") -> str:
    """Return `value` if it is a string, `default` otherwise."""
    if isinstance(value, str):
        return value
    if value is not None:
        logger.warning("[BaseRenameOperation] Ignoring non-string value: %r", value)
    return default
