"""Shared fixtures for OptionsGroup tests."""

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from optionsgroup.core.config import unified_config
from optionsgroup.core.config.unified_config import reset_config
from providers.host.settings_host import SettingsHost
from providers.stores.memory_store import InMemoryOptionStore
from registry import reset_registry


@pytest.fixture
def memory_store() -> InMemoryOptionStore:
    """Empty in-memory option store."""
    return InMemoryOptionStore()


@pytest.fixture
def host(memory_store: InMemoryOptionStore) -> SettingsHost:
    """Settings host over the in-memory store."""
    return SettingsHost(memory_store)


@pytest.fixture
def log_messages() -> Generator[list[str], None, None]:
    """Collect loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point configuration discovery at a temporary project directory.

    Clears OPTIONSGROUP_* environment variables, moves the user config
    directory under tmp_path and makes tmp_path the working directory.
    """
    for key in list(os.environ):
        if key.upper().startswith("OPTIONSGROUP_"):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "home"
    user_dir.mkdir()
    project_dir = tmp_path / "project"
    project_dir.mkdir()

    monkeypatch.setattr(unified_config, "DEFAULT_STORE_DIR", user_dir)
    monkeypatch.chdir(project_dir)
    reset_config()
    reset_registry()

    yield project_dir

    reset_config()
    reset_registry()
