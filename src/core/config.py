"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los flags de la CLI tienen prioridad; lo que falte se toma de aquí.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.network import LedgerNetwork

APP_NAME = "hedera-cli"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Valores `None` se ignoran (no borran lo que ya hubiera).
    """

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# hedera-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    # Contiene la clave privada del operador.
    if not sys.platform.startswith("win"):
        env_path.chmod(0o600)
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="HEDERA_CLI_",
        extra="ignore",
        case_sensitive=False,
        # El último archivo gana: config global de usuario, luego .env del proyecto (dev).
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    network: str = Field(
        default=LedgerNetwork.TESTNET.value,
        description="Red por defecto (mainnet, testnet, previewnet).",
    )
    operator_account: str | None = Field(
        default=None,
        description="Cuenta operadora por defecto (0.0.x).",
    )
    operator_private_key: str | None = Field(
        default=None,
        repr=False,
        description="Clave privada de la cuenta operadora.",
    )

    initial_balance_tinybars: int = Field(
        default=0,
        ge=0,
        description="Saldo inicial de las cuentas creadas (tinybars).",
    )
    topic_max_fee_tinybars: int = Field(
        default=100_000_000,
        gt=0,
        description="Comisión máxima para crear un topic (tinybars; 1 hbar por defecto).",
    )
    default_topic_memo: str = Field(
        default="test topic",
        max_length=100,
        description="Memo por defecto para topics nuevos.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout para el mirror node (segundos).",
    )
    user_agent: str = Field(
        default="hedera-cli/0.1",
        min_length=1,
        description="User-Agent para peticiones HTTP.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def ledger_network(self) -> LedgerNetwork:
        return LedgerNetwork.parse(self.network)


def load_settings() -> AppSettings:
    """Instancia `AppSettings` resolviendo el .env de usuario en este momento.

    `model_config.env_file` se evalúa al importar el módulo; aquí se vuelve a
    calcular para respetar cambios posteriores de XDG_CONFIG_HOME/APPDATA.
    """

    return AppSettings(_env_file=(str(get_user_env_file()), ".env"))
