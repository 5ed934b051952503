"""OSPF neighbors and their state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

from .interface import OspfInterface
from .log import get_logger
from .packet import HelloPacket

DEFAULT_CAPACITY = 10


class NeighborState(IntEnum):
    """Neighbor adjacency states, in order of progress."""

    DOWN = 0
    INIT = 1
    TWO_WAY = 2
    EXSTART = 3
    EXCHANGE = 4
    LOADING = 5
    FULL = 6


@dataclass
class Neighbor:
    """A neighboring router seen on one of our interfaces."""

    neighbor_id: int = 0
    neighbor_ip: int = 0
    state: NeighborState = NeighborState.DOWN
    interface: OspfInterface | None = None

    def update_state(self, new_state: NeighborState) -> None:
        """Move to *new_state*."""
        self.state = NeighborState(new_state)
        get_logger().info(
            "Neighbor %u state updated to %d", self.neighbor_id, int(self.state)
        )

    def handle_hello(self, hello: HelloPacket) -> None:
        """Advance the state on receipt of a Hello packet."""
        if self.state is NeighborState.DOWN:
            self.update_state(NeighborState.INIT)
        elif self.state in (NeighborState.INIT, NeighborState.TWO_WAY):
            self.update_state(NeighborState.TWO_WAY)


class NeighborTable:
    """A fixed number of neighbor slots; a slot in DOWN state is free."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots = [Neighbor() for _ in range(capacity)]

    def add(self, neighbor_id: int, interface: OspfInterface | None) -> Neighbor:
        """Place the neighbor in the first free slot, in INIT state."""
        for slot in self._slots:
            if slot.state is NeighborState.DOWN:
                slot.neighbor_id = neighbor_id
                slot.interface = interface
                slot.state = NeighborState.INIT
                get_logger().info("Neighbor %u added.", neighbor_id)
                return slot
        raise ValueError(f"neighbor table is full, cannot add {neighbor_id}")

    def remove(self, neighbor_id: int) -> bool:
        """Mark the first slot with *neighbor_id* as DOWN; False if none matches."""
        for slot in self._slots:
            if slot.neighbor_id == neighbor_id:
                slot.state = NeighborState.DOWN
                get_logger().info("Neighbor %u removed.", neighbor_id)
                return True
        return False

    def __getitem__(self, index: int) -> Neighbor:
        return self._slots[index]

    def __iter__(self) -> Iterator[Neighbor]:
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)