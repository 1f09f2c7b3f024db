"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los objetos del SDK (AccountId, PrivateKey, TransactionReceipt...) no se
  serializan de forma estable; aquí los reducimos a strings/ints.
- La misma estructura sirve para la salida de texto, la salida JSON y los tests.

Nota:
- Estos modelos describen *qué* devolvió la red, no *cómo* se obtuvo.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.domain.network import LedgerNetwork

ACCOUNT_ID_PATTERN = r"^\d+\.\d+\.\d+$"


def is_account_id(text: str) -> bool:
    """True for plain `shard.realm.num` ids; aliases and EVM addresses are rejected."""

    return re.fullmatch(ACCOUNT_ID_PATTERN, text.strip()) is not None


class OperatorCredentials(BaseModel):
    """Identidad que paga y firma las operaciones."""

    account_id: str = Field(
        ...,
        pattern=ACCOUNT_ID_PATTERN,
        description="Cuenta operadora en formato shard.realm.num (p.ej. 0.0.1234).",
    )
    private_key: str = Field(
        ...,
        min_length=1,
        repr=False,
        description="Clave privada de la cuenta operadora (hex o DER).",
    )
    network: LedgerNetwork = Field(
        default=LedgerNetwork.TESTNET,
        description="Red contra la que se ejecutan las operaciones.",
    )

    @field_validator("account_id", "private_key", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class CreatedAccount(BaseModel):
    """Resultado de crear una cuenta nueva."""

    account_id: str = Field(..., description="Id de la cuenta creada.")
    private_key: str = Field(..., description="Clave privada Ed25519 generada para la cuenta.")
    public_key: str = Field(..., description="Clave pública asociada.")
    status: str = Field(..., description="Estado del recibo (p.ej. SUCCESS).")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Campos del recibo para trazabilidad.",
    )


class CreatedTopic(BaseModel):
    """Resultado de crear un topic de consenso."""

    topic_id: str = Field(..., description="Id del topic creado.")
    memo: str = Field(default="", description="Memo con el que se creó el topic.")
    submit_key: str = Field(..., description="Clave privada para enviar mensajes al topic.")
    admin_key: str = Field(..., description="Clave privada para administrar el topic.")
    status: str = Field(..., description="Estado del recibo.")


class AccountBalance(BaseModel):
    account_id: str = Field(..., pattern=ACCOUNT_ID_PATTERN)
    hbars: str = Field(..., description="Saldo en hbar, tal como lo formatea el SDK.")
    tinybars: int = Field(..., ge=0)
    tokens: dict[str, int] = Field(
        default_factory=dict,
        description="Saldos de tokens por token id.",
    )
