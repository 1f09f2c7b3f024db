"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con scripts y pipelines (`--json`).
- Permite guardar las claves generadas (`--output`) en vez de copiarlas de la
  terminal.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pydantic import BaseModel


def render_json(model: BaseModel) -> str:
    """Serializa un modelo a JSON UTF-8 con formato estable."""

    payload = model.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: BaseModel, output_path: Path) -> Path:
    """Escribe el resultado en `output_path` (con permisos 0600: lleva claves privadas)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_json(result) + "\n", encoding="utf-8")
    if not sys.platform.startswith("win"):
        output_path.chmod(0o600)
    return output_path
