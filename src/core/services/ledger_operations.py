"""Ledger operation runners.

Each command of the CLI maps to one function here. The functions take a
`LedgerGateway` so they never touch the SDK directly, and they own the one
decision the CLI makes on top of the SDK: a receipt that is not SUCCESS is
a failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.models import AccountBalance, CreatedAccount, CreatedTopic
from core.errors import ReceiptStatusError
from core.interfaces.ledger import LedgerGateway

log = logging.getLogger(__name__)

SUCCESS_STATUS = "SUCCESS"


@dataclass
class CreateAccountRequest:
    initial_balance_tinybars: int = 0


@dataclass
class CreateTopicRequest:
    memo: str = "test topic"
    max_fee_tinybars: int = 100_000_000


@dataclass
class BalanceRequest:
    account_id: str


def _check_status(what: str, status: str) -> None:
    if status != SUCCESS_STATUS:
        raise ReceiptStatusError(what, status)


def create_account(gateway: LedgerGateway, request: CreateAccountRequest) -> CreatedAccount:
    """Create an account keyed by a freshly generated Ed25519 key."""

    log.info("Creating account (initial balance %d tinybars)", request.initial_balance_tinybars)
    created = gateway.create_account(initial_balance_tinybars=request.initial_balance_tinybars)
    _check_status("account", created.status)
    log.info("Account %s created", created.account_id)
    return created


def create_topic(gateway: LedgerGateway, request: CreateTopicRequest) -> CreatedTopic:
    """Create a consensus topic with new admin and submit keys."""

    log.info("Creating topic with memo %r (max fee %d tinybars)", request.memo, request.max_fee_tinybars)
    created = gateway.create_topic(memo=request.memo, max_fee_tinybars=request.max_fee_tinybars)
    _check_status("topic", created.status)
    log.info("Topic %s created", created.topic_id)
    return created


def account_balance(gateway: LedgerGateway, request: BalanceRequest) -> AccountBalance:
    log.info("Querying balance of %s", request.account_id)
    return gateway.account_balance(request.account_id)
