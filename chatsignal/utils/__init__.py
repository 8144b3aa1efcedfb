"""
Utility modules for ChatSignal v1
"""

from .lru_cache import BoundedLRUCache
from .timing import Timer

__all__ = [
    'BoundedLRUCache',
    'Timer',
]
