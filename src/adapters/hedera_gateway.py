"""Gateway a la red Hedera sobre hiero-sdk-python.

Implementa `core.interfaces.ledger.LedgerGateway`. Cada método es una
secuencia fija de llamadas al SDK: construir la transacción, ejecutarla
(el SDK espera el recibo) y reducir el resultado a un modelo del dominio.

No se interpreta el estado del recibo aquí; eso lo hace el servicio.
"""

from __future__ import annotations

import logging
from typing import Any

from hiero_sdk_python import (
    AccountCreateTransaction,
    CryptoGetAccountBalanceQuery,
    Hbar,
    PrivateKey,
    ResponseCode,
    TopicCreateTransaction,
)

from adapters.hedera_client import build_client, parse_account_id
from core.domain.models import AccountBalance, CreatedAccount, CreatedTopic, OperatorCredentials, is_account_id
from core.errors import InvalidCredentialsError, LedgerCallError

log = logging.getLogger(__name__)


def _status_name(status: Any) -> str:
    try:
        return ResponseCode(int(status)).name
    except (TypeError, ValueError):
        return str(status)


def _generate_key(purpose: str) -> PrivateKey:
    try:
        return PrivateKey.generate_ed25519()
    except Exception as exc:
        raise LedgerCallError(f"failed to generate a {purpose}") from exc


def _receipt_details(receipt: Any) -> dict[str, Any]:
    details: dict[str, Any] = {"status": _status_name(receipt.status)}
    for name in ("account_id", "topic_id", "transaction_id"):
        value = getattr(receipt, name, None)
        if value is not None:
            details[name] = str(value)
    return details


class HederaGateway:
    """Operaciones de la CLI contra una red Hedera real."""

    def __init__(self, credentials: OperatorCredentials) -> None:
        self._client, self._operator_id, self._operator_key = build_client(credentials)

    def create_account(self, *, initial_balance_tinybars: int) -> CreatedAccount:
        private_key = _generate_key("new private key")
        public_key = private_key.public_key()

        try:
            transaction = (
                AccountCreateTransaction()
                .set_key(public_key)
                .set_initial_balance(Hbar.from_tinybars(initial_balance_tinybars))
                .freeze_with(self._client)
            )
        except Exception as exc:
            raise LedgerCallError("failed to build create account transaction", exc) from exc

        try:
            receipt = transaction.execute(self._client)
        except Exception as exc:
            raise LedgerCallError("failed to execute transaction", exc) from exc
        log.debug("Account create receipt: %s", _status_name(receipt.status))

        account_id = receipt.account_id
        return CreatedAccount(
            account_id=str(account_id) if account_id is not None else "",
            private_key=private_key.to_string_der(),
            public_key=public_key.to_string_der(),
            status=_status_name(receipt.status),
            details=_receipt_details(receipt),
        )

    def create_topic(self, *, memo: str, max_fee_tinybars: int) -> CreatedTopic:
        admin_key = _generate_key("private topic admin key")
        submit_key = _generate_key("private topic submit key")

        try:
            transaction = (
                TopicCreateTransaction()
                .set_memo(memo)
                .set_admin_key(admin_key.public_key())
                .set_submit_key(submit_key.public_key())
                .set_auto_renew_account(self._operator_id)
            )
            transaction.transaction_fee = max_fee_tinybars
            transaction.freeze_with(self._client)
        except Exception as exc:
            raise LedgerCallError("failed to build topic create transaction", exc) from exc

        try:
            # The admin key must co-sign; the operator signature is added by the client too.
            transaction.sign(self._operator_key)
            transaction.sign(admin_key)
            receipt = transaction.execute(self._client)
        except Exception as exc:
            raise LedgerCallError("failed to execute transaction", exc) from exc
        log.debug("Topic create receipt: %s", _status_name(receipt.status))

        topic_id = receipt.topic_id
        return CreatedTopic(
            topic_id=str(topic_id) if topic_id is not None else "",
            memo=memo,
            submit_key=submit_key.to_string_der(),
            admin_key=admin_key.to_string_der(),
            status=_status_name(receipt.status),
        )

    def account_balance(self, account_id: str) -> AccountBalance:
        if not is_account_id(account_id):
            raise InvalidCredentialsError(f"invalid account id {account_id!r}")
        target = parse_account_id(account_id)
        try:
            balance = CryptoGetAccountBalanceQuery().set_account_id(target).execute(self._client)
        except Exception as exc:
            raise LedgerCallError("failed to query account balance", exc) from exc

        tokens = {str(token_id): int(amount) for token_id, amount in (balance.token_balances or {}).items()}
        return AccountBalance(
            account_id=str(target),
            hbars=str(balance.hbars),
            tinybars=balance.hbars.to_tinybars(),
            tokens=tokens,
        )

    def close(self) -> None:
        self._client.close()
