"""Shared fixtures for CLI tests."""

import logging
import os

import pytest

from goscaffold.logging_config import LOG_LEVEL_ENV_VAR


def pytest_collection_modifyitems(items):
    for item in items:
        if f"{os.sep}cli{os.sep}" in str(item.fspath) and "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def restore_root_logger(monkeypatch):
    """The CLI reconfigures the root logger; put it back after each test."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def in_tmp_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
