"""Adjacency list storage for directed graphs."""

from collections.abc import Sequence
from typing import Iterator, List


class Neighbors(Sequence):

    """A read-only view of one adjacency slot.

    The view is live: it reflects later edges added to the slot and sees the
    slot cleared when its vertex is deleted. It compares equal to any list or
    tuple holding the same ids in the same order.
    """

    def __init__(self, ids: List[int]):
        self._ids = ids

    def __repr__(self) -> str:
        return repr(self._ids)

    def __getitem__(self, index):
        return self._ids[index]

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Neighbors):
            return self._ids == other._ids
        if isinstance(other, (list, tuple)):
            return self._ids == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore


class AdjacencyList:

    """A mapping from vertex id to the ordered ids of its out-neighbors.

    Ids are indices into a list of slots. Slots are only ever appended or
    cleared, so an id stays a valid index for the lifetime of the list.
    Destinations are stored as given: duplicates, self-loops and ids with no
    live vertex are all allowed.
    """

    def __init__(self):
        self._slots: List[List[int]] = []

    def __repr__(self) -> str:
        return f"AdjacencyList(slots={len(self._slots)})"

    def __len__(self) -> int:
        return len(self._slots)

    def _slot(self, v: int) -> List[int]:
        # Reject negatives explicitly; list indexing would wrap around.
        if not 0 <= v < len(self._slots):
            raise IndexError(f"no adjacency slot for vertex {v} ({len(self._slots)} slots)")
        return self._slots[v]

    def add_slot(self):
        """Append an empty slot for the next vertex id."""
        self._slots.append([])

    def add_edge(self, src: int, dst: int):
        self._slot(src).append(dst)

    def delete_vertex(self, v: int):
        """Clear the out-neighbors of v. The slot itself stays."""
        self._slot(v).clear()

    def get_adjacent_vertices(self, src: int) -> Neighbors:
        return Neighbors(self._slot(src))

    def count_edges(self) -> int:
        return sum(len(slot) for slot in self._slots)
