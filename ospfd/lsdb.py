"""In-memory link-state database."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from .log import get_logger
from .lsa import Lsa, LsaError

LSDB_MAX_ENTRIES = 1024


class LsdbFullError(Exception):
    """Raised when a new LSA does not fit into the database."""


class LinkStateDatabase:
    """LSAs keyed by link-state ID and advertising router, in arrival order."""

    def __init__(self, capacity: int = LSDB_MAX_ENTRIES):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._entries: dict[tuple[int, int], Lsa] = {}
        self.pending_floods: list[tuple[Lsa, int]] = []

    def lookup(self, link_state_id: int, advertising_router: int) -> Lsa | None:
        """Return the stored LSA for the key, or None."""
        return self._entries.get((link_state_id, advertising_router))

    def add(self, lsa: Lsa) -> None:
        """Store a copy of *lsa*, replacing any LSA with the same key in place."""
        key = (lsa.link_state_id, lsa.advertising_router)
        if key not in self._entries and len(self._entries) >= self.capacity:
            raise LsdbFullError(f"LSDB is full, cannot add LSA ID {lsa.link_state_id}")
        replacing = key in self._entries
        self._entries[key] = replace(lsa)
        get_logger().debug(
            "%s LSA in LSDB: ID %u",
            "Updated existing" if replacing else "Added new",
            lsa.link_state_id,
        )

    def remove(self, link_state_id: int, advertising_router: int) -> bool:
        """Delete the LSA for the key; return False if it was not present."""
        if self._entries.pop((link_state_id, advertising_router), None) is None:
            get_logger().debug("LSA ID %u not found in LSDB.", link_state_id)
            return False
        get_logger().debug("Removed LSA from LSDB: ID %u", link_state_id)
        return True

    def flood(self, lsa: Lsa, received_interface_id: int) -> None:
        """Queue *lsa* for flooding on every interface but the one it came from."""
        self.pending_floods.append((replace(lsa), received_interface_id))
        get_logger().debug(
            "Flooding LSA ID %u to neighbors, except on interface %d",
            lsa.link_state_id, received_interface_id,
        )

    def process(self, lsa: Lsa, interface_id: int) -> bool:
        """Accept an incoming LSA; return True if it was new or newer and got flooded."""
        if not lsa.validate():
            raise LsaError(f"LSA ID {lsa.link_state_id} failed validation")
        existing = self.lookup(lsa.link_state_id, lsa.advertising_router)
        if existing is not None and lsa.sequence_number <= existing.sequence_number:
            get_logger().debug(
                "Received older or identical LSA ID %u, no update required.",
                lsa.link_state_id,
            )
            return False
        self.add(lsa)
        self.flood(lsa, interface_id)
        return True

    def dump(self) -> str:
        """Return a human-readable listing of every entry."""
        lines = [f"OSPF LSDB - Total Entries: {len(self._entries)}"]
        lines.extend(
            f"LSA ID {lsa.link_state_id}, Advertising Router {lsa.advertising_router}, "
            f"Type {int(lsa.type)}, Seq No {lsa.sequence_number}, Age {lsa.age}"
            for lsa in self._entries.values()
        )
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Lsa]:
        return iter(list(self._entries.values()))