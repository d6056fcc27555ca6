"""Soroban RPC client (JSON-RPC 2.0 over aiohttp)."""
import logging
import ssl
from itertools import count
from typing import Any
from urllib.parse import urlparse

import aiohttp
import certifi

from ...config import OracleConfig
from ...errors import RpcError

logger = logging.getLogger(__name__)


class SorobanClient:
    """Soroban RPC client bound to a single endpoint.

    Each call opens its own session so concurrent calls share nothing but
    the immutable URL and timeout. Network failures are not retried.
    """

    def __init__(self, config: OracleConfig) -> None:
        if urlparse(config.rpc_url).scheme == "http" and not config.allow_http:
            raise ValueError(
                f"Cannot connect to insecure RPC server '{config.rpc_url}' "
                "unless allow_http is set"
            )
        self.rpc_url = config.rpc_url
        self.timeout = config.rpc_timeout
        self._ids = count(1)

    async def rpc_call(self, method: str, params: Any = None) -> dict[str, Any]:
        """Make one RPC call and return its ``result`` object."""
        payload: dict[str, Any] = {"jsonrpc": "2.0", "id": next(self._ids), "method": method}
        if params is not None:
            payload["params"] = params

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        async with aiohttp.ClientSession(connector=connector) as session:
            async with session.post(
                self.rpc_url,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    text = await response.text()
                    raise RpcError(response.status, f"HTTP {response.status}: {text}")

                result = await response.json()
                if "error" in result:
                    error = result["error"] or {}
                    raise RpcError(error.get("code"), error.get("message", str(error)))

                logger.debug("%s answered by %s", method, self.rpc_url)
                return result.get("result", {})

    async def simulate_transaction(self, envelope_xdr: str) -> dict[str, Any]:
        """Run a transaction envelope through the simulation engine."""
        return await self.rpc_call(
            "simulateTransaction", {"transaction": envelope_xdr}
        )

    async def get_health(self) -> dict[str, Any]:
        """Probe the endpoint (``status``, ``latestLedger``, ...)."""
        return await self.rpc_call("getHealth")
