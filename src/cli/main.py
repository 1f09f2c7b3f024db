"""CLI principal (Typer).

Comandos:
- `create-account`: crea una cuenta con una clave Ed25519 nueva.
- `create-topic`: crea un topic de consenso con claves admin/submit nuevas.
- `account-balance`: consulta el saldo de una cuenta.
- `doctor`: diagnóstico y configuración del operador.

La CLI solo resuelve flags/config, abre el gateway y presenta resultados; la
lógica vive en `core.services.ledger_operations`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NoReturn

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.hedera_gateway import HederaGateway
from adapters.json_exporter import export_result_json, render_json
from cli import doctor
from cli.ui_components import (
    print_account_balance,
    print_banner,
    print_created_account,
    print_created_topic,
)
from core.config import AppSettings, load_settings
from core.domain.models import OperatorCredentials, is_account_id
from core.domain.network import LedgerNetwork
from core.errors import LedgerCliError
from core.interfaces.ledger import LedgerGateway
from core.services import ledger_operations

app = typer.Typer(
    name="hedera-cli",
    no_args_is_help=True,
    add_completion=False,
    help="Create accounts and topics and query balances on a Hedera network.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

log = logging.getLogger(__name__)

_NETWORK_HELP = "hedera network (mainnet, testnet, previewnet)"
_OPERATOR_ACCOUNT_HELP = "the operator account id"
_OPERATOR_KEY_HELP = "the operator private key"


def configure_logging(level: str) -> None:
    """Logs a stderr vía Rich; stdout queda libre para los resultados."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    handler = RichHandler(console=_err_console, show_path=False, show_time=False)
    root.addHandler(handler)
    root.setLevel(level.upper())


def open_gateway(credentials: OperatorCredentials) -> LedgerGateway:
    return HederaGateway(credentials)


def _settings(ctx: typer.Context) -> AppSettings:
    obj = ctx.find_root().obj or {}
    settings = obj.get("settings")
    return settings if isinstance(settings, AppSettings) else load_settings()


def resolve_credentials(
    settings: AppSettings,
    *,
    network: str | None,
    operator_account: str | None,
    operator_private_key: str | None,
) -> OperatorCredentials:
    """Flags first, then configuration. Missing or malformed values are usage errors."""

    account = operator_account or settings.operator_account
    key = operator_private_key or settings.operator_private_key
    if not account:
        raise typer.BadParameter("operator account is required", param_hint="--operator-account")
    if not key:
        raise typer.BadParameter("operator private key is required", param_hint="--operator-private-key")

    try:
        return OperatorCredentials(
            account_id=account,
            private_key=key,
            network=LedgerNetwork.parse(network or settings.network),
        )
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid account id {account!r}", param_hint="--operator-account") from exc


@contextmanager
def _session(ctx: typer.Context, credentials: OperatorCredentials, *, json_output: bool) -> Iterator[LedgerGateway]:
    obj = ctx.find_root().obj or {}
    if obj.get("banner") and not json_output and _console.is_terminal:
        print_banner(_console, credentials.network)

    try:
        gateway = open_gateway(credentials)
    except LedgerCliError as exc:
        _fail(exc)
    try:
        yield gateway
    except LedgerCliError as exc:
        _fail(exc)
    finally:
        gateway.close()


def _fail(exc: LedgerCliError) -> NoReturn:
    log.debug("Command failed", exc_info=exc)
    _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _emit(result: BaseModel, *, json_output: bool, output: Path | None, printer) -> None:
    if json_output:
        _console.print_json(render_json(result))
    else:
        printer(_console, result)
    if output is not None:
        path = export_result_json(result=result, output_path=output)
        _err_console.print(f"[green]Saved to:[/green] {path}")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner"),
) -> None:
    try:
        settings = load_settings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
        _err_console.print(f"[red]Error:[/red] invalid configuration: {escape(fields)}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = {"settings": settings, "banner": not no_banner}


@app.command("create-account", help="Create a new account keyed by a freshly generated Ed25519 key.")
def create_account(
    ctx: typer.Context,
    network: str = typer.Option(None, "--network", help=_NETWORK_HELP, show_default="testnet"),
    operator_account: str = typer.Option(None, "--operator-account", help=_OPERATOR_ACCOUNT_HELP),
    operator_private_key: str = typer.Option(None, "--operator-private-key", help=_OPERATOR_KEY_HELP),
    initial_balance: int = typer.Option(None, "--initial-balance", min=0, help="initial balance in tinybars"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this file"),
) -> None:
    settings = _settings(ctx)
    credentials = resolve_credentials(
        settings,
        network=network,
        operator_account=operator_account,
        operator_private_key=operator_private_key,
    )
    request = ledger_operations.CreateAccountRequest(
        initial_balance_tinybars=settings.initial_balance_tinybars if initial_balance is None else initial_balance,
    )
    with _session(ctx, credentials, json_output=json_output) as gateway:
        created = ledger_operations.create_account(gateway, request)
    _emit(created, json_output=json_output, output=output, printer=print_created_account)


@app.command("create-topic", help="Create a consensus topic with new admin and submit keys.")
def create_topic(
    ctx: typer.Context,
    network: str = typer.Option(None, "--network", help=_NETWORK_HELP, show_default="testnet"),
    operator_account: str = typer.Option(None, "--operator-account", help=_OPERATOR_ACCOUNT_HELP),
    operator_private_key: str = typer.Option(None, "--operator-private-key", help=_OPERATOR_KEY_HELP),
    memo: str = typer.Option(None, "--memo", help="the memo of the topic to be created", show_default="test topic"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this file"),
) -> None:
    settings = _settings(ctx)
    credentials = resolve_credentials(
        settings,
        network=network,
        operator_account=operator_account,
        operator_private_key=operator_private_key,
    )
    request = ledger_operations.CreateTopicRequest(
        memo=settings.default_topic_memo if memo is None else memo,
        max_fee_tinybars=settings.topic_max_fee_tinybars,
    )
    with _session(ctx, credentials, json_output=json_output) as gateway:
        created = ledger_operations.create_topic(gateway, request)
    _emit(created, json_output=json_output, output=output, printer=print_created_topic)


@app.command("account-balance", help="Query the hbar and token balance of an account.")
def account_balance(
    ctx: typer.Context,
    network: str = typer.Option(None, "--network", help=_NETWORK_HELP, show_default="testnet"),
    operator_account: str = typer.Option(None, "--operator-account", help=_OPERATOR_ACCOUNT_HELP),
    operator_private_key: str = typer.Option(None, "--operator-private-key", help=_OPERATOR_KEY_HELP),
    account_id: str = typer.Option(None, "--account-id", help="the account to query (defaults to the operator)"),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this file"),
) -> None:
    settings = _settings(ctx)
    credentials = resolve_credentials(
        settings,
        network=network,
        operator_account=operator_account,
        operator_private_key=operator_private_key,
    )
    target = (account_id or credentials.account_id).strip()
    if not is_account_id(target):
        raise typer.BadParameter(f"invalid account id {target!r}", param_hint="--account-id")
    request = ledger_operations.BalanceRequest(account_id=target)
    with _session(ctx, credentials, json_output=json_output) as gateway:
        balance = ledger_operations.account_balance(gateway, request)
    _emit(balance, json_output=json_output, output=output, printer=print_account_balance)


def run() -> None:
    app()
