"""Soroban contract plumbing: value codec, call builder, simulator."""
from . import codec
from .invocation import build_invocation
from .simulation import Simulator

__all__ = ["Simulator", "build_invocation", "codec"]
