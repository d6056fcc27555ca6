"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "https://rpc.lightsail.network"

# Zero-balance mainnet account; only used as the source of simulated transactions.
DEFAULT_SIM_ACCOUNT = "GALAXYVOIDAOPZTDLHILAJQKCVVFMD4IKLXLSZV5YHO7VY74IWZILUTO"


# ---------------------------------------------------------------------------
# Frozen config dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OracleConfig:
    oracle_id: str = ""
    rpc_url: str = DEFAULT_RPC_URL
    allow_http: bool = False
    sim_account: str = DEFAULT_SIM_ACCOUNT
    rpc_timeout: int = 30


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


# ---------------------------------------------------------------------------
# YAML → dataclass builder
# ---------------------------------------------------------------------------


def _build_oracle(raw: dict[str, Any]) -> OracleConfig:
    return OracleConfig(
        oracle_id=raw.get("oracle_id", "") or "",
        rpc_url=raw.get("rpc_url") or DEFAULT_RPC_URL,
        allow_http=_as_bool(raw.get("allow_http", False)),
        sim_account=raw.get("sim_account") or DEFAULT_SIM_ACCOUNT,
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path) -> OracleConfig:
    """Load and validate oracle configuration from YAML + .env.

    The YAML document holds an ``oracle`` mapping; values may reference
    environment variables as ``${NAME}``.
    """
    load_dotenv()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = _build_oracle(raw.get("oracle", {}) or {})
    validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def validate(cfg: OracleConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.oracle_id:
        raise ValueError("An oracle contract id must be configured")

    if cfg.rpc_timeout <= 0:
        raise ValueError(f"rpc_timeout must be positive, got {cfg.rpc_timeout}")

    scheme = urlparse(cfg.rpc_url).scheme
    if scheme not in ("http", "https"):
        raise ValueError(f"Unsupported RPC URL scheme: '{cfg.rpc_url}'")
    if scheme == "http" and not cfg.allow_http:
        raise ValueError(
            f"Cannot connect to insecure RPC server '{cfg.rpc_url}' "
            "unless allow_http is set"
        )
