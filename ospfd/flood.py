"""Flooding of LSAs to neighbors, acknowledgements and retransmission."""

from __future__ import annotations

from typing import Iterable

from .log import get_logger
from .lsa import Lsa
from .neighbor import Neighbor, NeighborState


def flood_lsa(lsa: Lsa, neighbors: Iterable[Neighbor]) -> list[int]:
    """Flood *lsa* to every neighbor in TWO_WAY or later; return their IDs."""
    flooded = []
    for neighbor in neighbors:
        if neighbor.state >= NeighborState.TWO_WAY:
            get_logger().info("Flooding LSA to neighbor %u", neighbor.neighbor_id)
            flooded.append(neighbor.neighbor_id)
    return flooded


def handle_lsa_ack(lsa: Lsa, neighbor_id: int) -> str:
    """Record an acknowledgement of *lsa* from a neighbor; return the notice."""
    message = (
        f"Received LSA ack from neighbor {neighbor_id} "
        f"for LSA with link_state_id {lsa.link_state_id}"
    )
    get_logger().info("%s", message)
    return message


def retransmit_lsa(neighbor: Neighbor) -> bool:
    """Retransmit to *neighbor* if it is in TWO_WAY or later; return whether it was."""
    if neighbor.state >= NeighborState.TWO_WAY:
        get_logger().info("Retransmitting LSA to neighbor %u", neighbor.neighbor_id)
        return True
    return False