"""Shared fixtures: keep tests away from the user's real config."""

import logging

import pytest
from rich.logging import RichHandler

from namesmith import config as config_module
from namesmith.cli.commands import config_cmd

_ENV_VARS = (
    "NAMESMITH_DATA_DIR",
    "NAMESMITH_RARITY",
    "NAMESMITH_COUNT",
    "NAMESMITH_TITLE_CASE",
)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()


@pytest.fixture(autouse=True)
def drop_cli_log_handlers():
    """CLI invocations install a RichHandler on the root logger; remove it."""
    yield
    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)
    logging.getLogger("namesmith").setLevel(logging.NOTSET)
