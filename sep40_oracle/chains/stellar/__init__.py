from .client import SorobanClient

__all__ = ["SorobanClient"]
