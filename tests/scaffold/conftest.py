"""Shared fixtures for scaffolder tests."""

import os
import sys

import pytest

# Ensure tests/scaffold/ is on sys.path so test files can import
# fake_repository_initializer unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_repository_initializer import FakeRepositoryInitializer  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if f"{os.sep}scaffold{os.sep}" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def fake_initializer():
    return FakeRepositoryInitializer()
