"""OSPF protocol toolkit: packets, LSAs, link-state database, neighbors, areas, routes and a daemon loop."""

__version__ = "0.1.0"