"""Contrato del gateway hacia la red.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el SDK real por un fake en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AccountBalance, CreatedAccount, CreatedTopic


@runtime_checkable
class LedgerGateway(Protocol):
    """Operaciones que la CLI necesita de la red.

    Reglas de diseño:
    - Llamadas bloqueantes; el SDK hace el polling del recibo.
    - Devuelven modelos del dominio con el estado del recibo sin interpretar;
      decidir si es un fallo es cosa del servicio.
    """

    def create_account(self, *, initial_balance_tinybars: int) -> CreatedAccount:
        ...

    def create_topic(self, *, memo: str, max_fee_tinybars: int) -> CreatedTopic:
        ...

    def account_balance(self, account_id: str) -> AccountBalance:
        ...

    def close(self) -> None:
        ...
