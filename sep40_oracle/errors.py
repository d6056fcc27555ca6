"""Exception hierarchy for oracle queries."""
from __future__ import annotations

from typing import Any


class OracleError(Exception):
    """Base class for every error raised by this package."""


class RpcError(OracleError):
    """The RPC endpoint answered with a JSON-RPC error object."""

    def __init__(self, code: Any, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"RPC Error {code}: {message}")


class SimulationFailed(OracleError):
    """The simulation engine rejected the contract call."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NoDataAvailable(OracleError):
    """The contract ran successfully but has no record for the query."""

    def __init__(self, message: str, asset: Any, timestamp: int | None = None) -> None:
        self.asset = asset
        self.timestamp = timestamp
        super().__init__(message)
