"""Chain client protocol — Soroban RPC abstraction."""
from typing import Any, Protocol


class SorobanRpc(Protocol):
    """What the simulator needs from a Soroban RPC endpoint."""

    async def simulate_transaction(self, envelope_xdr: str) -> dict[str, Any]: ...
