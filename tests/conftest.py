"""Shared test fixtures for placefolder."""

import shutil
from pathlib import Path

import pytest

from placefolder.registry.loader import load_registry

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the default registry location into tmp_path for every test."""
    config = tmp_path / "home" / ".pf.conf.json"
    monkeypatch.setenv("PF_CONFIG_PATH", str(config))
    monkeypatch.delenv("PF_EDITOR", raising=False)
    monkeypatch.delenv("PF_LOG", raising=False)
    return config


@pytest.fixture
def registry():
    return load_registry(FIXTURES / "registry-minimal.json")


@pytest.fixture
def registry_file(tmp_path):
    """A writable copy of the minimal fixture registry."""
    target = tmp_path / "registry.json"
    shutil.copy(FIXTURES / "registry-minimal.json", target)
    return target
