from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.domain.models import OperatorCredentials
from fakes import FakeGateway


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch) -> Path:
    """Keep every test away from the real user config and any local .env."""

    for key in list(os.environ):
        if key.upper().startswith("HEDERA_CLI_"):
            monkeypatch.delenv(key, raising=False)
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.chdir(tmp_path)
    # Wide enough that Rich never wraps error panels or key lines.
    monkeypatch.setenv("COLUMNS", "200")
    return config_home


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def credentials() -> OperatorCredentials:
    return OperatorCredentials(account_id="0.0.1001", private_key="abcdef")
