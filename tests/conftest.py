# tests/conftest.py
import pytest


SUITE_MARKERS = {
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
    "e2e": pytest.mark.e2e,
}


def pytest_collection_modifyitems(items):
    """Mark each test after the suite directory it lives in, so `-m` can pick suites."""
    for item in items:
        for directory in item.path.parent.parts:
            marker = SUITE_MARKERS.get(directory)
            if marker:
                item.add_marker(marker)
