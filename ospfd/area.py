"""OSPF areas, the networks in them and the area table."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from typing import Iterator

from .log import get_logger

MAX_AREAS = 128

_RULE = "-" * 55


@dataclass
class Network:
    """A network prefix announced within an area."""

    network_prefix: str

    def __post_init__(self) -> None:
        if not self.network_prefix:
            raise ValueError("network prefix must not be empty")
        get_logger().info("OSPF network created with prefix: %s", self.network_prefix)


@dataclass
class Area:
    """An OSPF area with its attached interface addresses."""

    area_id: int
    is_stub: bool = False
    interfaces: list[ipaddress.IPv4Address] = field(default_factory=list)

    @property
    def num_interfaces(self) -> int:
        return len(self.interfaces)


class AreaTable:
    """Areas in insertion order, each ID appearing once."""

    def __init__(self, capacity: int = MAX_AREAS):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._areas: list[Area] = []
        get_logger().info(
            "OSPF Area Table initialized with capacity for up to %d areas.", capacity
        )

    def add(self, area_id: int, is_stub: bool = False) -> Area:
        """Add a new area; duplicates and a full table are errors."""
        if len(self._areas) >= self.capacity:
            raise ValueError("maximum area capacity reached")
        if any(area.area_id == area_id for area in self._areas):
            raise ValueError(f"area with ID {area_id} already exists")
        area = Area(area_id, bool(is_stub))
        self._areas.append(area)
        get_logger().info("OSPF Area Added - Area ID: %u, Stub: %d", area_id, int(area.is_stub))
        return area

    def remove(self, area_id: int) -> Area:
        """Remove and return the area; KeyError if it is not in the table."""
        for index, area in enumerate(self._areas):
            if area.area_id == area_id:
                del self._areas[index]
                get_logger().info("OSPF Area Removed - Area ID: %u", area_id)
                return area
        raise KeyError(f"area ID {area_id} not found in table")

    def update(self) -> list[int]:
        """Re-evaluate every area's settings; return the IDs that were visited."""
        get_logger().info("Updating OSPF Area configurations...")
        for area in self._areas:
            area.interfaces = list(dict.fromkeys(area.interfaces))
        return [area.area_id for area in self._areas]

    def format(self) -> str:
        """Render the table as fixed-width text."""
        lines = [
            "OSPF Area Table:",
            _RULE,
            f"| {'Area ID':<10} | {'Stub':<5} | {'Interfaces':<13} |",
            _RULE,
        ]
        lines.extend(
            f"| {area.area_id:<10} | {int(area.is_stub):<5} | {area.num_interfaces:<13} |"
            for area in self._areas
        )
        lines.append(_RULE)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._areas)

    def __iter__(self) -> Iterator[Area]:
        return iter(list(self._areas))