"""Test doubles for the ledger gateway."""

from __future__ import annotations

from core.domain.models import AccountBalance, CreatedAccount, CreatedTopic


class FakeGateway:
    """In-memory `LedgerGateway` recording every call."""

    def __init__(
        self,
        *,
        account_status: str = "SUCCESS",
        topic_status: str = "SUCCESS",
        error: Exception | None = None,
    ) -> None:
        self.account_status = account_status
        self.topic_status = topic_status
        self.error = error
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def create_account(self, *, initial_balance_tinybars: int) -> CreatedAccount:
        self.calls.append(("create_account", {"initial_balance_tinybars": initial_balance_tinybars}))
        if self.error:
            raise self.error
        return CreatedAccount(
            account_id="0.0.5005",
            private_key="302e-private",
            public_key="302a-public",
            status=self.account_status,
            details={"status": self.account_status, "account_id": "0.0.5005"},
        )

    def create_topic(self, *, memo: str, max_fee_tinybars: int) -> CreatedTopic:
        self.calls.append(("create_topic", {"memo": memo, "max_fee_tinybars": max_fee_tinybars}))
        if self.error:
            raise self.error
        return CreatedTopic(
            topic_id="0.0.7007",
            memo=memo,
            submit_key="submit-key",
            admin_key="admin-key",
            status=self.topic_status,
        )

    def account_balance(self, account_id: str) -> AccountBalance:
        self.calls.append(("account_balance", {"account_id": account_id}))
        if self.error:
            raise self.error
        return AccountBalance(
            account_id=account_id,
            hbars="12.50000000 ℏ",
            tinybars=1_250_000_000,
            tokens={"0.0.9001": 42},
        )

    def close(self) -> None:
        self.closed = True
