"""Shared pytest configuration for havenox examples.

Provides the ``example_app`` fixture that loads a fresh App from the
``app.py`` file next to the test, pointed at a per-test data directory.
"""

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Load a fresh App from the sibling app.py next to the test file."""
    monkeypatch.setenv("HAVENOX_DATA_DIR", str(tmp_path / "data"))
    app_path = Path(request.path).parent / "app.py"
    module_name = f"example_{app_path.parent.name}"
    spec = importlib.util.spec_from_file_location(module_name, app_path)
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.app
