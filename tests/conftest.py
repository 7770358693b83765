"""Global pytest fixtures and hooks for ROLODEX."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.datagen",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# Every item collected under tests/<folder>/ gets the matching mark.
FOLDER_MARKERS = {"unit": "unit", "contract": "contract"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to items that do not carry it yet."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if (marker_name := FOLDER_MARKERS.get(folder)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))
