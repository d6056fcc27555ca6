"""Simulation-only execution of contract calls."""
from __future__ import annotations

import logging

from stellar_sdk import Account, InvokeHostFunction, Network, TransactionBuilder, xdr

from ..errors import SimulationFailed
from ..interfaces.chain import SorobanRpc

logger = logging.getLogger(__name__)

SIM_SEQUENCE = 0


class Simulator:
    """Run a single contract call through ``simulateTransaction`` and return its value.

    Transactions are built from a placeholder source account with a zero fee
    and no upper time bound. They are never signed and never submitted, so
    the account needs no balance and its sequence number never moves.
    """

    def __init__(self, rpc: SorobanRpc, sim_account: str) -> None:
        self._rpc = rpc
        self._sim_account = sim_account
        # Fails fast on a malformed placeholder address.
        Account(sim_account, SIM_SEQUENCE)

    def _envelope(self, operation: InvokeHostFunction) -> str:
        # build() bumps the source sequence, so start from a fresh account each time.
        source = Account(self._sim_account, SIM_SEQUENCE)
        envelope = (
            TransactionBuilder(
                source_account=source,
                network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE,
                base_fee=0,
            )
            .add_time_bounds(0, 0)
            .append_operation(operation)
            .build()
        )
        return envelope.to_xdr()

    async def simulate(self, operation: InvokeHostFunction) -> xdr.SCVal:
        """Simulate ``operation`` and return the contract's return value.

        Raises:
            SimulationFailed: the engine rejected the call.
        """
        response = await self._rpc.simulate_transaction(self._envelope(operation))

        error = response.get("error")
        if error:
            raise SimulationFailed(str(error))

        results = response.get("results") or []
        if not results or not results[0].get("xdr"):
            raise SimulationFailed("Simulation returned no result")

        logger.debug(
            "Simulated %s at ledger %s",
            operation.host_function.invoke_contract.function_name.sc_symbol.decode(),
            response.get("latestLedger"),
        )
        return xdr.SCVal.from_xdr(results[0]["xdr"])
