"""OSPF interfaces: discovery, configuration and status."""

from __future__ import annotations

import errno
import ipaddress
import socket
import struct
import sys
from dataclasses import dataclass

try:
    import fcntl
except ImportError:  # pragma: no cover - non-POSIX platforms
    fcntl = None

DEFAULT_MTU = 1500
MAX_INTERVAL = 0xFFFF

_SIOCGIFADDR = 0x8915
_SIOCGIFNETMASK = 0x891B
_IFREQ = struct.Struct("256s")
_IFNAMSIZ = 16
_SOCKADDR_IN_ADDR = slice(20, 24)


@dataclass
class OspfInterface:
    """A local IPv4 interface that OSPF may run on."""

    name: str
    ip_address: ipaddress.IPv4Address
    network_mask: ipaddress.IPv4Address
    mtu: int = DEFAULT_MTU
    hello_interval: int = 0
    dead_interval: int = 0
    enabled: bool = True

    def __post_init__(self) -> None:
        self.ip_address = ipaddress.IPv4Address(self.ip_address)
        self.network_mask = ipaddress.IPv4Address(self.network_mask)
        self.enabled = bool(self.enabled)

    def configure(self, hello_interval: int, dead_interval: int, enabled: bool) -> None:
        """Set the Hello and dead intervals and whether the interface is enabled."""
        for label, value in (("hello", hello_interval), ("dead", dead_interval)):
            if not 0 <= value <= MAX_INTERVAL:
                raise ValueError(f"{label} interval {value} out of range")
        self.hello_interval = hello_interval
        self.dead_interval = dead_interval
        self.enabled = bool(enabled)

    def status_message(self) -> str:
        """Describe whether the interface is up or down."""
        state = "up" if self.enabled else "down"
        return f"Interface {self.name} is {state}."


def _ioctl_address(sock: socket.socket, name: str, request: int) -> ipaddress.IPv4Address:
    ifreq = _IFREQ.pack(name.encode()[: _IFNAMSIZ - 1])
    result = fcntl.ioctl(sock.fileno(), request, ifreq)
    return ipaddress.IPv4Address(result[_SOCKADDR_IN_ADDR])


def discover_interfaces(max_interfaces: int = 10) -> list[OspfInterface]:
    """Return up to *max_interfaces* local interfaces that carry an IPv4 address."""
    if max_interfaces < 0:
        raise ValueError("max_interfaces must not be negative")
    if fcntl is None or not sys.platform.startswith("linux"):
        raise OSError(errno.ENOSYS, "interface discovery is not supported here")
    found: list[OspfInterface] = []
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        for _, name in socket.if_nameindex():
            if len(found) >= max_interfaces:
                break
            try:
                address = _ioctl_address(sock, name, _SIOCGIFADDR)
                mask = _ioctl_address(sock, name, _SIOCGIFNETMASK)
            except OSError:
                continue
            found.append(OspfInterface(name, address, mask))
    return found