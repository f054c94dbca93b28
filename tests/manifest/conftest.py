import os

import pytest


def pytest_collection_modifyitems(items):
    for item in items:
        if f"{os.sep}manifest{os.sep}" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
