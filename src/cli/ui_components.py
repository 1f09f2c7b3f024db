"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Mantiene el formato de texto plano de cada resultado en un solo lugar.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AccountBalance, CreatedAccount, CreatedTopic
from core.domain.network import LedgerNetwork

SEPARATOR = "--------------"


def print_banner(console: Console, network: LedgerNetwork) -> None:
    """Imprime el banner de bienvenida.

    Solo se llama en terminales interactivas: con `--json` o en pipelines la
    salida debe ser únicamente el resultado.
    """

    title = Text("hedera-cli", style="bold cyan")
    subtitle = Text(f"network: {network.value}", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _line(console: Console, text: str) -> None:
    # Claves e ids se imprimen tal cual, sin markup ni resaltado.
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_created_account(console: Console, account: CreatedAccount) -> None:
    _line(console, "Account created.")
    _line(console, f"Account ID: {account.account_id}")
    _line(console, f"Private Key: {account.private_key}")
    _line(console, f"Public Key: {account.public_key}")
    _line(console, f"Status: {account.status}")
    _line(console, f"Details: {account.details}")


def print_created_topic(console: Console, topic: CreatedTopic) -> None:
    _line(console, "Topic created.")
    _line(console, f"Topic ID: {topic.topic_id}")
    _line(console, SEPARATOR)
    _line(console, f"Topic Submit Key: {topic.submit_key}")
    _line(console, SEPARATOR)
    _line(console, f"Topic Admin Key: {topic.admin_key}")
    _line(console, SEPARATOR)


def print_account_balance(console: Console, balance: AccountBalance) -> None:
    _line(console, f"Account ID: {balance.account_id}")
    _line(console, f"Balance: {balance.hbars}")
    for token_id, amount in sorted(balance.tokens.items()):
        _line(console, f"Token {token_id}: {amount}")


def build_checks_table(title: str) -> Table:
    """Tabla de tres columnas para `doctor run`."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
