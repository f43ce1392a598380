"""Ports layer - Interfaces for callers and external collaborators."""

from .cache import CacheItemPoolPort, CacheItemPort
from .clock import ClockPort
from .key_value_store import KeyValueStorePort
from .logger import LoggerPort

__all__ = [
    "CacheItemPoolPort",
    "CacheItemPort",
    "ClockPort",
    "KeyValueStorePort",
    "LoggerPort",
]
