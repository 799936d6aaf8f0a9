"""Tests for OperationRegistry.

Author: Michael Economou
Date: 2025-12-27

Tests operation discovery, menu ordering and chain serialization.
"""

import json

import pytest

from bulkrename.core.bulk_renamer import BulkRenamer
from bulkrename.core.exceptions import UnknownOperationError
from bulkrename.core.operation_registry import OperationDescriptor, OperationRegistry
from bulkrename.models.case_mode import CaseMode
from bulkrename.operations.add_string_operation import AddStringOperation
from bulkrename.operations.change_case_operation import ChangeCaseOperation
from bulkrename.operations.enumerate_operation import EnumerateOperation
from bulkrename.operations.remove_characters_operation import RemoveCharactersOperation


class TestDiscovery:
    """Test built-in operation discovery."""

    def test_all_builtin_operations_registered(self, registry):
        names = {desc.name for desc in registry.get_available_operations()}
        assert names == {
            "replace_string",
            "add_string",
            "enumerate",
            "change_case",
            "trim_characters",
            "remove_characters",
            "replace_name",
        }

    def test_menu_order(self, registry):
        orders = [desc.menu_order for desc in registry.get_available_operations()]
        assert orders == sorted(orders)
        assert registry.get_display_names()[0] == "Replace String"

    def test_descriptor_metadata(self, registry):
        desc = registry.get_descriptor("remove_characters")
        assert isinstance(desc, OperationDescriptor)
        assert desc.display_name == "Remove Characters"
        assert desc.operation_class is RemoveCharactersOperation
        assert desc.menu_order == 6
        assert desc.description

    def test_empty_registry(self):
        assert OperationRegistry(discover=False).get_available_operations() == []

    def test_unknown_type(self, registry):
        with pytest.raises(UnknownOperationError) as exc_info:
            registry.get_descriptor("shuffle")
        assert "shuffle" in str(exc_info.value)


class TestCreateOperation:
    """Test creating operations from type ids and data."""

    def test_create_with_defaults(self, registry):
        op = registry.create_operation("enumerate")
        assert isinstance(op, EnumerateOperation)
        assert op.get_data()["start"] == 0

    def test_create_with_data(self, registry):
        op = registry.create_operation("change_case", {"mode": "UPPER"})
        assert isinstance(op, ChangeCaseOperation)
        assert op.mode is CaseMode.UPPER

    def test_create_unknown_raises(self, registry):
        with pytest.raises(UnknownOperationError):
            registry.create_operation("nope")


class TestChainSerialization:
    """Test chain_to_data / chain_from_data."""

    def make_chain(self):
        remove = RemoveCharactersOperation()
        remove.set_custom_preset("aeiou", False)
        return [remove, AddStringOperation(prefix="x_"), EnumerateOperation(start=1, padding=2)]

    def test_round_trip_gives_same_previews(self, registry):
        chain = self.make_chain()
        data = json.loads(json.dumps(registry.chain_to_data(chain)))

        restored = registry.chain_from_data(data)

        names = ["Alpha", "Beta", "Gamma"]
        assert BulkRenamer(restored).get_rename_previews(names) == BulkRenamer(
            chain
        ).get_rename_previews(names)
        assert [p.result for p in BulkRenamer(restored).get_rename_previews(names)] == [
            "x_lph01",
            "x_Bt02",
            "x_Gmm03",
        ]

    def test_bad_items_are_skipped(self, registry):
        data = [
            {"type": "add_string", "prefix": "p"},
            "not a dict",
            {"type": "unknown"},
            {"prefix": "no type"},
            {"type": ["unhashable"]},
            {"type": "add_string", "suffix": "s"},
        ]
        chain = registry.chain_from_data(data)
        assert [op.get_data() for op in chain] == [
            {"type": "add_string", "prefix": "p", "suffix": ""},
            {"type": "add_string", "prefix": "", "suffix": "s"},
        ]

    def test_register_custom_operation(self, registry):
        class ReverseOperation(AddStringOperation):
            OPERATION_TYPE = "reverse"
            DISPLAY_NAME = "Reverse"
            MENU_ORDER = 0

            def rename(self, text, position_index):
                return text[::-1]

        registry.register_operation(ReverseOperation)

        assert registry.get_display_names()[0] == "Reverse"
        assert registry.create_operation("reverse").rename("abc", 0) == "cba"
