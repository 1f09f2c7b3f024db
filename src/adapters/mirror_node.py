"""Mirror node checks used by `doctor`.

The mirror node is the read-only REST face of a network. Reaching it is a
cheap way to tell whether the network (and our connectivity) is up without
spending anything.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.network import LedgerNetwork


@dataclass
class MirrorStatus:
    ok: bool
    detail: str


async def check_mirror_node(
    network: LedgerNetwork,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MirrorStatus:
    """GET /api/v1/network/nodes and report how many nodes answered."""

    try:
        async with build_async_client(settings, base_url=network.mirror_url, transport=transport) as client:
            response = await client.get("/api/v1/network/nodes", params={"limit": 1})
    except httpx.HTTPError as exc:
        return MirrorStatus(ok=False, detail=str(exc) or exc.__class__.__name__)

    if response.status_code != 200:
        return MirrorStatus(ok=False, detail=f"HTTP {response.status_code}")
    try:
        nodes = response.json().get("nodes") or []
    except ValueError:
        return MirrorStatus(ok=False, detail="HTTP 200 (invalid JSON)")
    return MirrorStatus(ok=True, detail=f"HTTP 200, {len(nodes)} node(s) listed")


async def fetch_account_summary(
    network: LedgerNetwork,
    account_id: str,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict | None:
    """Public account record from the mirror node, or None if it does not exist."""

    async with build_async_client(settings, base_url=network.mirror_url, transport=transport) as client:
        response = await client.get(f"/api/v1/accounts/{account_id}")
    if response.status_code == 404:
        return None
    response.raise_for_status()
    return response.json()
