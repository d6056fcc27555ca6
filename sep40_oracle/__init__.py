"""Read-only SEP-40 price oracle client for Soroban contracts."""
from .config import OracleConfig, load_config
from .errors import NoDataAvailable, OracleError, RpcError, SimulationFailed
from .logging_setup import configure_logging
from .models import Asset, AssetType, OtherAsset, PriceData, StellarAsset
from .oracle import Oracle

__all__ = [
    "Asset",
    "AssetType",
    "NoDataAvailable",
    "Oracle",
    "OracleConfig",
    "OracleError",
    "OtherAsset",
    "PriceData",
    "RpcError",
    "SimulationFailed",
    "StellarAsset",
    "configure_logging",
    "load_config",
]
