"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.hedera_client import parse_account_id, parse_private_key
from adapters.mirror_node import check_mirror_node, fetch_account_summary
from cli.ui_components import build_checks_table
from core.config import AppSettings, get_user_env_file, load_settings, write_user_env_vars
from core.domain.models import is_account_id
from core.domain.network import LedgerNetwork
from core.errors import InvalidCredentialsError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and operator configuration.")

_console = Console()


def _check_operator_key(settings: AppSettings) -> tuple[str, str]:
    if not settings.operator_private_key:
        return "MISSING", "Set HEDERA_CLI_OPERATOR_PRIVATE_KEY or pass --operator-private-key"
    try:
        parse_private_key(settings.operator_private_key)
    except InvalidCredentialsError as exc:
        return "FAIL", str(exc)
    return "OK", "Key parses"


def _check_operator_account(settings: AppSettings, network: LedgerNetwork) -> tuple[str, str]:
    if not settings.operator_account:
        return "MISSING", "Set HEDERA_CLI_OPERATOR_ACCOUNT or pass --operator-account"
    try:
        parse_account_id(settings.operator_account)
    except InvalidCredentialsError as exc:
        return "FAIL", str(exc)

    try:
        summary = asyncio.run(fetch_account_summary(network, settings.operator_account, settings))
    except Exception as exc:
        return "UNKNOWN", f"{settings.operator_account} (mirror lookup failed: {exc})"
    if summary is None:
        return "FAIL", f"{settings.operator_account} not found on {network.value}"
    return "OK", settings.operator_account


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = load_settings()
    network = settings.ledger_network

    table = build_checks_table("hedera-cli Doctor")

    # Config
    table.add_row("Network", "OK", network.value)
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "NONE", str(env_file))

    # Connectivity (best-effort)
    mirror = asyncio.run(check_mirror_node(network, settings))
    table.add_row("Mirror node", "OK" if mirror.ok else "FAIL", f"{network.mirror_url} -> {mirror.detail}")

    status, detail = _check_operator_account(settings, network)
    table.add_row("Operator account", status, detail)
    status, detail = _check_operator_key(settings)
    table.add_row("Operator key", status, detail)

    _console.print(table)

    if not settings.operator_account or not settings.operator_private_key:
        _console.print("\n[yellow]Note:[/yellow] Run `hedera-cli doctor setup-operator` to store operator credentials.")


@app.command(name="setup-operator")
def setup_operator() -> None:
    """Interactive operator setup (stores config in the user config .env)."""

    network_name = typer.prompt(
        "Network",
        default=LedgerNetwork.default().value,
        show_default=True,
    ).strip().lower()
    network = LedgerNetwork.parse(network_name)

    account = typer.prompt("Operator account id (0.0.x)").strip()
    key = typer.prompt("Operator private key", hide_input=True, confirmation_prompt=False).strip()

    if not is_account_id(account):
        raise typer.BadParameter(f"invalid account id {account!r} (expected shard.realm.num)")
    try:
        parse_account_id(account)
        parse_private_key(key)
    except InvalidCredentialsError as exc:
        raise typer.BadParameter(str(exc)) from exc

    env_path = write_user_env_vars(
        {
            "HEDERA_CLI_NETWORK": network.value,
            "HEDERA_CLI_OPERATOR_ACCOUNT": account,
            "HEDERA_CLI_OPERATOR_PRIVATE_KEY": key,
        }
    )

    _console.print(f"[green]Saved operator config to:[/green] {env_path}")
