"""Module: operation_registry.py

Author: Michael Economou
Date: 2025-12-27

Registry of available rename operation types.

Responsibilities:
- Operation discovery (scans bulkrename/operations/ for *_operation.py)
- Menu ordering of operation types
- Creating operations from serialized data and serializing chains back
"""

from __future__ import annotations

import importlib
import inspect
import pkgutil
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from bulkrename.core.exceptions import UnknownOperationError
from bulkrename.operations.base_operation import BaseRenameOperation
from bulkrename.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


class OperationDescriptor:
    """Describes an operation type and its menu metadata."""

    def __init__(
        self,
        name: str,
        display_name: str,
        operation_class: type[BaseRenameOperation],
        menu_order: int = 100,
        description: str = "",
    ):
        self.name = name  # Serialization id
        self.display_name = display_name  # Menu label
        self.operation_class = operation_class
        self.menu_order = menu_order
        self.description = description

    def __repr__(self) -> str:
        return f"OperationDescriptor({self.name!r}, order={self.menu_order})"


class OperationRegistry:
    """Registry of operation types, independent of any UI.

    A UI lists `get_available_operations()` in its "add operation" menu, and
    saved chains go through `chain_to_data` / `chain_from_data`.
    """

    def __init__(self, discover: bool = True):
        """Initialize the registry, discovering built-in operations unless disabled."""
        self._registry: dict[str, OperationDescriptor] = {}
        if discover:
            self.discover_operations()

    def discover_operations(self) -> None:
        """Auto-discover and register operation classes from bulkrename/operations/.

        Scans *_operation.py modules for concrete BaseRenameOperation subclasses
        that declare an OPERATION_TYPE.
        """
        import bulkrename.operations

        operations_path = Path(bulkrename.operations.__file__).parent
        logger.debug("[OperationRegistry] Discovering operations in: %s", operations_path)

        discovered_count = 0
        for _importer, module_name, _is_pkg in pkgutil.iter_modules([str(operations_path)]):
            if not module_name.endswith("_operation") or module_name == "base_operation":
                continue

            module = importlib.import_module(f"bulkrename.operations.{module_name}")
            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if (
                    not issubclass(obj, BaseRenameOperation)
                    or inspect.isabstract(obj)
                    or not obj.OPERATION_TYPE
                    or obj.__module__ != module.__name__
                ):
                    continue

                self.register_operation(obj)
                discovered_count += 1

        logger.debug(
            "[OperationRegistry] Discovery complete: %d operations registered",
            discovered_count,
            extra={"dev_only": True},
        )

    def register_operation(self, operation_class: type[BaseRenameOperation]) -> OperationDescriptor:
        """Register an operation class under its OPERATION_TYPE.

        Registering a second class with the same id replaces the first.
        """
        description = operation_class.DESCRIPTION
        if not description and operation_class.__doc__:
            description = operation_class.__doc__.strip().split("\n")[0]

        descriptor = OperationDescriptor(
            name=operation_class.OPERATION_TYPE,
            display_name=operation_class.DISPLAY_NAME
            or operation_class.__name__.replace("Operation", ""),
            operation_class=operation_class,
            menu_order=operation_class.MENU_ORDER,
            description=description,
        )
        self._registry[descriptor.name] = descriptor
        logger.debug("[OperationRegistry] Registered operation: %s", descriptor.name)
        return descriptor

    def get_descriptor(self, operation_type: str) -> OperationDescriptor:
        """Return the descriptor for `operation_type`.

        Raises:
            UnknownOperationError: nothing is registered under that id.

        """
        try:
            return self._registry[operation_type]
        except KeyError:
            raise UnknownOperationError(operation_type) from None

    def get_available_operations(self) -> list[OperationDescriptor]:
        """Return all operation types sorted for menu presentation."""
        return sorted(self._registry.values(), key=lambda d: (d.menu_order, d.display_name))

    def get_display_names(self) -> list[str]:
        """Return menu labels in menu order."""
        return [desc.display_name for desc in self.get_available_operations()]

    def create_operation(
        self, operation_type: str, data: dict[str, Any] | None = None
    ) -> BaseRenameOperation:
        """Create an operation with default configuration, then apply `data` if given."""
        descriptor = self.get_descriptor(operation_type)
        operation = descriptor.operation_class()
        if data:
            operation.set_data(data)
        return operation

    def chain_to_data(self, operations: Iterable[BaseRenameOperation]) -> list[dict[str, Any]]:
        """Serialize a chain to a list of dicts, in chain order."""
        return [operation.get_data() for operation in operations]

    def chain_from_data(self, items: Iterable[Any]) -> list[BaseRenameOperation]:
        """Build a chain from serialized dicts.

        Items that are not dicts, lack a known "type", or fail to apply are
        skipped with a warning so one bad entry does not lose the whole chain.
        """
        operations: list[BaseRenameOperation] = []
        for position, item in enumerate(items):
            if not isinstance(item, dict):
                logger.warning("[OperationRegistry] Skipping non-dict chain item %d: %r", position, item)
                continue
            try:
                operations.append(self.create_operation(item.get("type", ""), item))
            except UnknownOperationError as e:
                logger.warning("[OperationRegistry] Skipping chain item %d: %s", position, e)
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning(
                    "[OperationRegistry] Skipping malformed chain item %d (%r): %s",
                    position,
                    item,
                    e,
                )
        return operations
