"""Builder del cliente Hedera (hiero-sdk-python).

Por qué un builder:
- Centraliza la elección de red y del operador para que todos los comandos
  se comporten igual.
- Convierte los errores de parseo del SDK en errores del Core con un mensaje
  legible.
"""

from __future__ import annotations

import logging

from hiero_sdk_python import AccountId, Client, Network, PrivateKey

from core.domain.models import OperatorCredentials
from core.domain.network import LedgerNetwork
from core.errors import InvalidCredentialsError, LedgerClientError

log = logging.getLogger(__name__)


def parse_account_id(text: str) -> AccountId:
    """Parse `shard.realm.num` into an SDK `AccountId`."""

    try:
        return AccountId.from_string(text.strip())
    except Exception as exc:
        raise InvalidCredentialsError(f"invalid account id {text!r}") from exc


def parse_private_key(text: str) -> PrivateKey:
    """Parse a hex or DER encoded private key.

    The key itself never appears in the error message.
    """

    try:
        return PrivateKey.from_string(text.strip())
    except Exception as exc:
        raise InvalidCredentialsError("invalid operator private key") from exc


def build_client(credentials: OperatorCredentials) -> tuple[Client, AccountId, PrivateKey]:
    """Create a `Client` for the credentials' network with the operator set.

    Returns the client together with the parsed operator id and key, which
    the gateway needs for signing and for the topic auto-renew account.
    """

    operator_id = parse_account_id(credentials.account_id)
    operator_key = parse_private_key(credentials.private_key)

    network: LedgerNetwork = credentials.network
    log.debug("Building client for %s (operator %s)", network.value, credentials.account_id)
    try:
        client = Client(Network(network=network.value))
        client.set_operator(operator_id, operator_key)
    except Exception as exc:
        raise LedgerClientError("failed to create hedera client") from exc
    return client, operator_id, operator_key
