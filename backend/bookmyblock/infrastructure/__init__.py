"""
Adapters to outside systems: the key-value store (memory or Redis) and the
Pinata pinning API with its IPFS gateways.
"""

from .kv_store import KeyValueStore, MemoryKeyValueStore, RedisKeyValueStore, NamespacedStore, create_kv_store
from .pinning_client import PinningClient

__all__ = [
    'KeyValueStore', 'MemoryKeyValueStore', 'RedisKeyValueStore', 'NamespacedStore', 'create_kv_store',
    'PinningClient',
]
