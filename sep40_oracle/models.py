"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class AssetType(str, Enum):
    """On-chain tag of a SEP-40 asset."""

    STELLAR = "Stellar"
    OTHER = "Other"


@dataclass(frozen=True)
class StellarAsset:
    """Asset identified by a Stellar account or contract address."""

    address: str

    @property
    def type(self) -> AssetType:
        return AssetType.STELLAR

    @property
    def value(self) -> str:
        return self.address


@dataclass(frozen=True)
class OtherAsset:
    """Asset identified by an off-chain symbol such as ``BTC`` or ``USD``."""

    code: str

    @property
    def type(self) -> AssetType:
        return AssetType.OTHER

    @property
    def value(self) -> str:
        return self.code


Asset = Union[StellarAsset, OtherAsset]


@dataclass(frozen=True)
class PriceData:
    """Single price record as reported by the oracle contract.

    ``price`` is the raw fixed-point value (scale it with ``decimals()``);
    ``timestamp`` is in seconds since the epoch.
    """

    price: int
    timestamp: int
