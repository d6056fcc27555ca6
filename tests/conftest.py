"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest
from stellar_sdk import Keypair, scval, xdr

from sep40_oracle.config import OracleConfig
from sep40_oracle.models import OtherAsset, PriceData, StellarAsset
from sep40_oracle.oracle import Oracle

# Reflector "External CEX & DEX" oracle on mainnet
REFLECTOR_CEX_DEX = "CAFJZQWSED6YAWZU3GWRTOCNPPCGBN32L7QV43XX5LZLFTK6JLN34DLN"


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_config() -> OracleConfig:
    return OracleConfig(
        oracle_id=REFLECTOR_CEX_DEX,
        rpc_url="https://rpc.example.com",
        rpc_timeout=10,
    )


SAMPLE_YAML = textwrap.dedent("""\
    oracle:
      oracle_id: "CAFJZQWSED6YAWZU3GWRTOCNPPCGBN32L7QV43XX5LZLFTK6JLN34DLN"
      rpc_url: "https://rpc.example.com"
      allow_http: false
      rpc_timeout: 10
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def btc() -> OtherAsset:
    return OtherAsset("BTC")


@pytest.fixture()
def stellar_asset() -> StellarAsset:
    return StellarAsset(Keypair.random().public_key)


@pytest.fixture()
def sample_records() -> list[PriceData]:
    return [
        PriceData(price=6_512_345_678_901_234_567, timestamp=1_700_000_600),
        PriceData(price=6_511_000_000_000_000_000, timestamp=1_700_000_300),
        PriceData(price=6_509_999_999_999_999_999, timestamp=1_700_000_000),
    ]


# ---------------------------------------------------------------------------
# SCVal builders (what the contract sends back)
# ---------------------------------------------------------------------------


def price_data_scval(record: PriceData) -> xdr.SCVal:
    return scval.to_map(
        {
            scval.to_symbol("price"): scval.to_int128(record.price),
            scval.to_symbol("timestamp"): scval.to_uint64(record.timestamp),
        }
    )


def sim_success(value: xdr.SCVal) -> dict[str, Any]:
    """A ``simulateTransaction`` result carrying one return value."""
    return {
        "latestLedger": 51_000_000,
        "minResourceFee": "12345",
        "results": [{"auth": [], "xdr": value.to_xdr()}],
    }


def sim_error(message: str) -> dict[str, Any]:
    return {"latestLedger": 51_000_000, "error": message}


# ---------------------------------------------------------------------------
# Oracle with a mocked RPC
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_rpc() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def oracle(sample_config: OracleConfig, mock_rpc: AsyncMock) -> Oracle:
    return Oracle(sample_config, rpc=mock_rpc)
