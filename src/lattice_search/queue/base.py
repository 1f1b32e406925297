"""
Abstract priority queue over QueueElements.

Elements carry their own priority and queue position; implementations keep
``position`` up to date so that membership and re-prioritization are O(1) to
locate.
"""

from abc import ABC, abstractmethod
from typing import List

from ..types import QueueElement


class PriorityQueue(ABC):
    """Min-priority queue of QueueElements."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of elements in the queue."""

    @abstractmethod
    def insert(self, e: QueueElement) -> None:
        """Insert an element using its current priority."""

    @abstractmethod
    def min(self) -> QueueElement:
        """
        Return the element with minimum priority without removing it.

        Raises:
            EmptyQueueError: If the queue is empty.
        """

    @abstractmethod
    def extract_min(self) -> QueueElement:
        """
        Remove and return the element with minimum priority.

        Raises:
            EmptyQueueError: If the queue is empty.
        """

    @abstractmethod
    def change_priority(self, e: QueueElement, priority: float) -> None:
        """
        Change the priority of an element already in the queue.

        Raises:
            ElementNotPresentError: If ``e`` is not in the queue.
        """

    @abstractmethod
    def contains(self, e: QueueElement) -> bool:
        """Return True if ``e`` is currently in the queue."""

    @abstractmethod
    def to_array(self) -> List[QueueElement]:
        """
        Return the queue members in unspecified order.

        The result is a new list; its order says nothing about priorities.
        """

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, e: QueueElement) -> bool:
        return self.contains(e)

    def __bool__(self) -> bool:
        return self.size() > 0
