#  MIT License
#
#  Copyright (c) 2025 by Dan Luca. All rights reserved.
#

import pytest

from tempconv.config import AppConfig


@pytest.fixture
def config(tmp_path, monkeypatch) -> AppConfig:
    """Fresh settings backed by a temporary file, installed as the CLI configuration."""
    app_config = AppConfig(tmp_path / "settings.json")
    monkeypatch.setattr("tempconv.cli.CONFIG", app_config)
    return app_config


@pytest.fixture
def no_locale_env(monkeypatch):
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        monkeypatch.delenv(var, raising=False)
