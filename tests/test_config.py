from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import get_user_env_file, load_settings, write_user_env_vars
from core.domain.network import LedgerNetwork


def test_defaults_without_env() -> None:
    settings = load_settings()

    assert settings.ledger_network is LedgerNetwork.TESTNET
    assert settings.operator_account is None
    assert settings.operator_private_key is None
    assert settings.topic_max_fee_tinybars == 100_000_000
    assert settings.default_topic_memo == "test topic"
    assert settings.initial_balance_tinybars == 0


def test_env_vars_use_prefix(monkeypatch) -> None:
    monkeypatch.setenv("HEDERA_CLI_NETWORK", "previewnet")
    monkeypatch.setenv("HEDERA_CLI_OPERATOR_ACCOUNT", "0.0.42")
    monkeypatch.setenv("HEDERA_CLI_TOPIC_MAX_FEE_TINYBARS", "500")

    settings = load_settings()

    assert settings.ledger_network is LedgerNetwork.PREVIEWNET
    assert settings.operator_account == "0.0.42"
    assert settings.topic_max_fee_tinybars == 500


def test_user_env_file_lives_under_xdg(_isolated_env: Path) -> None:
    assert get_user_env_file() == _isolated_env / "hedera-cli" / ".env"


def test_write_user_env_vars_merges_and_is_picked_up() -> None:
    write_user_env_vars({"HEDERA_CLI_NETWORK": "mainnet", "HEDERA_CLI_OPERATOR_ACCOUNT": "0.0.1"})
    path = write_user_env_vars({"HEDERA_CLI_OPERATOR_ACCOUNT": "0.0.2", "HEDERA_CLI_MEMO": None})

    text = path.read_text(encoding="utf-8")
    assert text.startswith("# hedera-cli user config (.env)")
    assert "HEDERA_CLI_NETWORK=mainnet" in text
    assert "HEDERA_CLI_OPERATOR_ACCOUNT=0.0.2" in text
    assert "HEDERA_CLI_MEMO" not in text
    assert path.stat().st_mode & 0o777 == 0o600

    settings = load_settings()
    assert settings.ledger_network is LedgerNetwork.MAINNET
    assert settings.operator_account == "0.0.2"


def test_project_env_file_wins_over_user_file(tmp_path: Path) -> None:
    write_user_env_vars({"HEDERA_CLI_OPERATOR_ACCOUNT": "0.0.2"})
    (tmp_path / ".env").write_text("HEDERA_CLI_OPERATOR_ACCOUNT=0.0.3\n", encoding="utf-8")

    assert load_settings().operator_account == "0.0.3"


def test_log_level_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("HEDERA_CLI_LOG_LEVEL", " debug ")

    assert load_settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("HEDERA_CLI_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="log_level"):
        load_settings()
