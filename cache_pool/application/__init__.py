"""Application layer - Cache item pool."""

from .cache_item_pool import CacheItemPool

__all__ = ["CacheItemPool"]
