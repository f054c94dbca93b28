import logging
import os

import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if f"{os.sep}logging-config{os.sep}" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    git_level = logging.getLogger("git").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("git").setLevel(git_level)
