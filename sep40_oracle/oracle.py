"""SEP-40 oracle facade — read-only queries via transaction simulation."""
from __future__ import annotations

import logging
from pathlib import Path

from stellar_sdk import xdr

from .chains.stellar import SorobanClient
from .config import OracleConfig, load_config, validate
from .contract import Simulator, build_invocation, codec
from .errors import NoDataAvailable
from .interfaces.chain import SorobanRpc
from .models import Asset, PriceData

logger = logging.getLogger(__name__)


class Oracle:
    """Simulated calls to the methods defined in SEP-0040.

    Nothing is ever signed or submitted; each query is one
    ``simulateTransaction`` round trip.
    """

    def __init__(self, config: OracleConfig, rpc: SorobanRpc | None = None) -> None:
        validate(config)
        self.contract_id = config.oracle_id
        self.rpc = rpc if rpc is not None else SorobanClient(config)
        self._simulator = Simulator(self.rpc, config.sim_account)

    @classmethod
    def from_config_file(cls, config_path: str | Path) -> Oracle:
        return cls(load_config(config_path))

    async def _call(self, method: str, *args: xdr.SCVal) -> xdr.SCVal:
        logger.debug("Calling %s on %s", method, self.contract_id)
        operation = build_invocation(self.contract_id, method, *args)
        return await self._simulator.simulate(operation)

    async def base(self) -> Asset:
        """Return the base asset the prices are reported in."""
        return codec.decode_asset(await self._call("base"))

    async def assets(self) -> list[Asset]:
        """Return all assets quoted by the price feed."""
        return codec.decode_assets(await self._call("assets"))

    async def decimals(self) -> int:
        """Return the number of decimals of every reported price."""
        return codec.decode_int(await self._call("decimals"))

    async def resolution(self) -> int:
        """Return the default tick period in seconds."""
        return codec.decode_int(await self._call("resolution"))

    async def prices(self, asset: Asset, records: int) -> list[PriceData]:
        """Return the last ``records`` price records, most recent first."""
        result = codec.decode_price_data_list(
            await self._call(
                "prices", codec.encode_asset(asset), codec.encode_u32(records)
            )
        )
        if result is None:
            raise NoDataAvailable(
                f"Prices for asset {asset.value} not available.", asset
            )
        return result

    async def last_price(self, asset: Asset) -> PriceData:
        """Return the most recent price for an asset."""
        result = codec.decode_price_data(
            await self._call("lastprice", codec.encode_asset(asset))
        )
        if result is None:
            raise NoDataAvailable(
                f"Last price for asset {asset.value} not available.", asset
            )
        return result

    async def price(self, asset: Asset, timestamp: int) -> PriceData:
        """Return the price of an asset at a given timestamp."""
        result = codec.decode_price_data(
            await self._call(
                "price", codec.encode_asset(asset), codec.encode_u64(int(timestamp))
            )
        )
        if result is None:
            raise NoDataAvailable(
                f"Price for asset {asset.value} at timestamp {timestamp} not available.",
                asset,
                timestamp,
            )
        return result
