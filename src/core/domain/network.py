"""Ledger networks supported by the CLI.

Only three public networks exist for our purposes. Anything unrecognised
falls back to testnet, so a typo never spends mainnet funds.
"""

from __future__ import annotations

import logging
from enum import Enum

log = logging.getLogger(__name__)

_MIRROR_URLS = {
    "mainnet": "https://mainnet-public.mirrornode.hedera.com",
    "testnet": "https://testnet.mirrornode.hedera.com",
    "previewnet": "https://previewnet.mirrornode.hedera.com",
}


class LedgerNetwork(str, Enum):
    """Named Hedera networks."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    PREVIEWNET = "previewnet"

    @classmethod
    def default(cls) -> "LedgerNetwork":
        return cls.TESTNET

    @classmethod
    def parse(cls, name: str | None) -> "LedgerNetwork":
        """Resolve a user-supplied name; unknown values mean testnet."""

        value = (name or "").strip().lower()
        for member in cls:
            if member.value == value:
                return member
        if value:
            log.warning("Unknown network %r, using %s", name, cls.default().value)
        return cls.default()

    @property
    def mirror_url(self) -> str:
        """Base URL of the public mirror node REST API."""

        return _MIRROR_URLS[self.value]
