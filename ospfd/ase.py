"""AS-external routes and the LSAs that announce them."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field
from enum import Enum

from .log import get_logger
from .lsa import Lsa, LsaType
from .lsdb import LinkStateDatabase
from .route import RouteTable, RouteTableFullError

INITIAL_SEQUENCE_NUMBER = 1


class ExternalRouteType(Enum):
    """Metric type of an external route."""

    TYPE_1 = 1
    TYPE_2 = 2


@dataclass
class ExternalRoute:
    """A route learned from outside the OSPF domain."""

    destination: ipaddress.IPv4Address
    metric: int
    type: ExternalRouteType = ExternalRouteType.TYPE_2
    next_hop: ipaddress.IPv4Address = ipaddress.IPv4Address(0)
    prefix_len: int = 32

    def __post_init__(self) -> None:
        self.destination = ipaddress.IPv4Address(self.destination)
        self.next_hop = ipaddress.IPv4Address(self.next_hop)
        self.type = ExternalRouteType(self.type)


@dataclass
class OspfInstance:
    """A router's identity together with its routing table and LSDB."""

    router_id: int
    route_table: RouteTable = field(default_factory=RouteTable)
    lsdb: LinkStateDatabase = field(default_factory=LinkStateDatabase)


def originate_ase_lsa(instance: OspfInstance, route: ExternalRoute) -> Lsa:
    """Create an AS-external LSA for *route* and store it in the instance's LSDB."""
    lsa = Lsa(
        type=LsaType.AS_EXTERNAL,
        link_state_id=int(route.destination),
        advertising_router=instance.router_id,
        sequence_number=INITIAL_SEQUENCE_NUMBER,
    )
    instance.lsdb.add(lsa)
    get_logger().info("Originated AS-external LSA for route: %s", route.destination)
    return lsa


def update_ase_route(instance: OspfInstance, route: ExternalRoute) -> Lsa | None:
    """Install or refresh an external route; return the LSA originated, if any."""
    table = instance.route_table
    existing = table.find(route.destination, route.prefix_len)
    if existing is not None:
        lsa = None
        if existing.cost != route.metric:
            existing.cost = route.metric
            lsa = originate_ase_lsa(instance, route)
        get_logger().info(
            "Updated AS-external route for destination: %s", route.destination
        )
        return lsa
    if len(table) >= table.capacity:
        raise RouteTableFullError("route table is full, cannot add new route")
    table.add(route.destination, route.next_hop, route.metric, route.prefix_len)
    lsa = originate_ase_lsa(instance, route)
    get_logger().info(
        "Added new AS-external route for destination: %s", route.destination
    )
    return lsa