from __future__ import annotations

import pytest
from typer.testing import CliRunner

from adapters.mirror_node import MirrorStatus
from cli import doctor
from cli.main import app
from core.config import get_user_env_file, load_settings
from core.errors import InvalidCredentialsError


runner = CliRunner()


@pytest.fixture
def offline(monkeypatch):
    async def check_mirror_node(network, settings=None, **_):
        return MirrorStatus(ok=True, detail="HTTP 200, 1 node(s) listed")

    async def fetch_account_summary(network, account_id, settings=None, **_):
        return {"account": account_id} if account_id != "0.0.404" else None

    monkeypatch.setattr(doctor, "check_mirror_node", check_mirror_node)
    monkeypatch.setattr(doctor, "fetch_account_summary", fetch_account_summary)
    monkeypatch.setattr(doctor, "parse_private_key", lambda text: text)


def test_doctor_run_without_operator_suggests_setup(offline) -> None:
    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Mirror node" in result.output
    assert "MISSING" in result.output
    assert "setup-operator" in result.output


def test_doctor_run_flags_unknown_operator(offline, monkeypatch) -> None:
    monkeypatch.setenv("HEDERA_CLI_OPERATOR_ACCOUNT", "0.0.404")
    monkeypatch.setenv("HEDERA_CLI_OPERATOR_PRIVATE_KEY", "abc")

    result = runner.invoke(app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "not found on testnet" in result.output


def test_setup_operator_writes_user_env(offline) -> None:
    result = runner.invoke(
        app,
        ["doctor", "setup-operator"],
        input="previewnet\n0.0.5\nsecret-key\n",
    )

    assert result.exit_code == 0, result.output
    assert "secret-key" not in result.output
    assert get_user_env_file().exists()

    settings = load_settings()
    assert settings.network == "previewnet"
    assert settings.operator_account == "0.0.5"
    assert settings.operator_private_key == "secret-key"


def test_setup_operator_rejects_bad_key(offline, monkeypatch) -> None:
    def reject(text):
        raise InvalidCredentialsError("invalid operator private key")

    monkeypatch.setattr(doctor, "parse_private_key", reject)

    result = runner.invoke(app, ["doctor", "setup-operator"], input="testnet\n0.0.5\nnope\n")

    assert result.exit_code == 2
    assert not get_user_env_file().exists()


def test_setup_operator_rejects_evm_address(offline) -> None:
    evm_address = "0x" + "ab" * 20

    result = runner.invoke(app, ["doctor", "setup-operator"], input=f"testnet\n{evm_address}\nsecret-key\n")

    assert result.exit_code == 2
    assert "invalid account id" in result.output
    assert not get_user_env_file().exists()
