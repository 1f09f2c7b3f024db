from __future__ import annotations

import pytest

from core.errors import LedgerCallError, ReceiptStatusError
from core.services import ledger_operations
from fakes import FakeGateway


def test_create_account_passes_initial_balance(fake_gateway) -> None:
    created = ledger_operations.create_account(
        fake_gateway,
        ledger_operations.CreateAccountRequest(initial_balance_tinybars=25),
    )

    assert created.account_id == "0.0.5005"
    assert fake_gateway.calls == [("create_account", {"initial_balance_tinybars": 25})]


def test_create_account_non_success_receipt_raises() -> None:
    gateway = FakeGateway(account_status="INSUFFICIENT_PAYER_BALANCE")

    with pytest.raises(ReceiptStatusError) as excinfo:
        ledger_operations.create_account(gateway, ledger_operations.CreateAccountRequest())

    assert excinfo.value.status == "INSUFFICIENT_PAYER_BALANCE"
    assert str(excinfo.value) == (
        "Unable to create hedera account (receipt shows non-Success status INSUFFICIENT_PAYER_BALANCE)"
    )


def test_create_topic_defaults(fake_gateway) -> None:
    created = ledger_operations.create_topic(fake_gateway, ledger_operations.CreateTopicRequest())

    assert created.topic_id == "0.0.7007"
    assert fake_gateway.calls == [("create_topic", {"memo": "test topic", "max_fee_tinybars": 100_000_000})]


def test_create_topic_non_success_receipt_raises() -> None:
    gateway = FakeGateway(topic_status="INVALID_SIGNATURE")

    with pytest.raises(ReceiptStatusError, match="Unable to create hedera topic"):
        ledger_operations.create_topic(gateway, ledger_operations.CreateTopicRequest(memo="m"))


def test_account_balance_delegates(fake_gateway) -> None:
    balance = ledger_operations.account_balance(fake_gateway, ledger_operations.BalanceRequest("0.0.77"))

    assert balance.account_id == "0.0.77"
    assert balance.tinybars == 1_250_000_000


def test_gateway_errors_propagate() -> None:
    gateway = FakeGateway(error=LedgerCallError("failed to execute transaction"))

    with pytest.raises(LedgerCallError, match="failed to execute transaction"):
        ledger_operations.create_account(gateway, ledger_operations.CreateAccountRequest())
