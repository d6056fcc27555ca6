"""Protocol interfaces for the SEP-40 oracle client."""
from .chain import SorobanRpc

__all__ = ["SorobanRpc"]
