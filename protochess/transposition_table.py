"""Clustered transposition table for search results."""

import enum
from dataclasses import dataclass, field, replace

from protochess.chess_move import Move

TABLE_SIZE = 1_500_000
ENTRIES_PER_CLUSTER = 4
_MAX_DEPTH = 255


class EntryFlag(enum.Enum):
    ALPHA = enum.auto()
    EXACT = enum.auto()
    BETA = enum.auto()
    NULL = enum.auto()


@dataclass
class Entry:
    key: int
    flag: EntryFlag
    value: int
    move: Move = field(default_factory=Move.null)
    depth: int = 0
    ancient: bool = False

    @classmethod
    def null(cls) -> "Entry":
        """Return an empty slot."""
        return cls(0, EntryFlag.NULL, 0, Move.null(), 0, True)


class TranspositionTable:
    """Fixed number of clusters, each of four entries, indexed by key modulo size.

    Clusters are materialised on first write; an untouched cluster behaves as
    four null entries.
    """

    def __init__(self, size: int = TABLE_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self._size = size
        self._clusters: dict[int, list[Entry]] = {}

    def set_ancient(self) -> None:
        """Mark every entry ancient so it is overwritten before newer ones."""
        for cluster in self._clusters.values():
            for entry in cluster:
                entry.ancient = True

    def _cluster(self, zobrist_key: int) -> list[Entry]:
        slot = zobrist_key % self._size
        cluster = self._clusters.get(slot)
        if cluster is None:
            cluster = [Entry.null() for _ in range(ENTRIES_PER_CLUSTER)]
            self._clusters[slot] = cluster
        return cluster

    def insert(self, zobrist_key: int, entry: Entry) -> None:
        """Store entry, replacing a shallower one for the same key if present."""
        cluster = self._cluster(zobrist_key)
        stored = replace(entry)
        for i, existing in enumerate(cluster):
            if (
                existing.depth <= entry.depth
                and existing.key == zobrist_key
                and existing.flag is not EntryFlag.NULL
            ):
                cluster[i] = stored
                return

        lowest_ancient_depth = _MAX_DEPTH
        lowest_ancient_index = None
        lowest_depth = _MAX_DEPTH
        lowest_index = 0
        for i, existing in enumerate(cluster):
            if existing.ancient and existing.depth <= lowest_ancient_depth:
                lowest_ancient_depth = existing.depth
                lowest_ancient_index = i
            if existing.depth <= lowest_depth:
                lowest_depth = existing.depth
                lowest_index = i

        target = lowest_ancient_index if lowest_ancient_index is not None else lowest_index
        cluster[target] = stored

    def retrieve(self, zobrist_key: int) -> Entry | None:
        """Return the stored entry for zobrist_key, or None."""
        cluster = self._clusters.get(zobrist_key % self._size)
        if cluster is None:
            return None
        return next(
            (e for e in cluster if e.key == zobrist_key and e.flag is not EntryFlag.NULL),
            None,
        )