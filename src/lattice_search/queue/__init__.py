"""
Priority queues for best-first search.

This module provides:
- The PriorityQueue contract (base.py)
- An indexed binary min-heap (min_heap.py)
"""

from .base import PriorityQueue
from .min_heap import GROWTH_FACTOR, MIN_CAPACITY, MinHeap

__all__ = [
    'PriorityQueue',
    'MinHeap',
    'MIN_CAPACITY',
    'GROWTH_FACTOR',
]
