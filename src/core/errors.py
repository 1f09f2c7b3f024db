"""Errores del Core.

Por qué una jerarquía propia:
- La CLI captura una sola base (`LedgerCliError`) y decide el exit code.
- Los fallos del SDK se envuelven con el paso que falló, sin perder la causa
  original (`raise ... from exc`).
"""

from __future__ import annotations


class LedgerCliError(Exception):
    """Base for every error the CLI reports as a clean failure."""


class InvalidCredentialsError(LedgerCliError):
    """Operator account id or private key could not be parsed."""


class LedgerClientError(LedgerCliError):
    """The network client could not be created."""


class LedgerCallError(LedgerCliError):
    """An SDK call failed; `step` names what we were trying to do."""

    def __init__(self, step: str, cause: BaseException | None = None) -> None:
        self.step = step
        message = step if cause is None else f"{step}: {cause}"
        super().__init__(message)


class ReceiptStatusError(LedgerCliError):
    """The receipt came back with a status other than SUCCESS."""

    def __init__(self, what: str, status: str) -> None:
        self.what = what
        self.status = status
        super().__init__(f"Unable to create hedera {what} (receipt shows non-Success status {status})")
