"""Chain-specific RPC clients."""
