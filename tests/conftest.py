"""Shared fixtures: every app and store writes under a per-test tmp dir."""

from pathlib import Path

import pytest

from havenox.app import App
from havenox.config import AppConfig
from havenox.data.store import CollectionStore
from havenox.service import create_app


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def store(data_dir: Path) -> CollectionStore:
    return CollectionStore(data_dir)


@pytest.fixture
def config(data_dir: Path) -> AppConfig:
    return AppConfig(data_dir=data_dir)


@pytest.fixture
def app(config: AppConfig) -> App:
    """The service app with its built-in routes."""
    return create_app(config)
