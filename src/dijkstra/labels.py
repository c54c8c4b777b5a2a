from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, eq=False)
class Label:
    """
    Represents a settled or tentative state in the Dijkstra search space.

    Each Label tracks:
    - Current position (airport code)
    - Total cost accumulated from the origin
    - Chain back to the previous label (for path reconstruction)

    The chain of prev pointers plays the role of the predecessor map:
    a label is only created when its cost strictly improves on the best
    known cost for that airport.
    """
    airport: str
    cost: float
    prev: Optional["Label"] = None

    def __eq__(self, other: object) -> bool:
        """Identity-based equality for heap operations."""
        return self is other

    def __hash__(self) -> int:
        """Identity-based hash for consistent behavior with __eq__."""
        return id(self)

    @property
    def hops(self) -> int:
        """Number of legs between the origin and this label."""
        count = 0
        curr = self.prev
        while curr is not None:
            count += 1
            curr = curr.prev
        return count
