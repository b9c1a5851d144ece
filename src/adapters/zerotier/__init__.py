"""ZeroTier adapters - Network membership via ZeroTier Central."""

from .central import ZeroTierCentralClient

__all__ = ["ZeroTierCentralClient"]
