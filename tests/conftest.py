"""
Module: conftest.py

Author: Michael Economou
Date: 2025-05-31

Global pytest configuration and fixtures for the bulkrename test suite.
"""

import os
import sys

# Add project root to sys.path so 'bulkrename' imports without installation
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from bulkrename.core.bulk_renamer import BulkRenamer
from bulkrename.core.operation_registry import OperationRegistry


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture
def renamer():
    """Fresh renamer with an empty chain."""
    return BulkRenamer()


@pytest.fixture
def registry():
    """Registry with the built-in operations discovered."""
    return OperationRegistry()


@pytest.fixture
def sample_names():
    """Typical asset names with symbols, digits and mixed case."""
    return ["Hero_01!", "villain-02?", "Boss (Final) 3", "plain"]
