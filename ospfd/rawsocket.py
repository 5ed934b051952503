"""Raw packet socket for sending and receiving OSPF over IPv4."""

from __future__ import annotations

import errno
import ipaddress
import socket
import struct

ETH_P_IP = 0x0800
ETH_ALEN = 6
IFNAMSIZ = 16
OSPF_PROTOCOL = 89
OSPF_TTL = 1
IP_HEADER_LENGTH = 20
MAX_FRAME = 1500

ALL_SPF_ROUTERS = ipaddress.IPv4Address("224.0.0.5")
ALL_D_ROUTERS = ipaddress.IPv4Address("224.0.0.6")

_IP_HEADER = struct.Struct("!BBHHHBBH4s4s")
_MREQN = struct.Struct("=4s4si")

AddressLike = str | int | bytes | ipaddress.IPv4Address


def build_ip_header(source: AddressLike, destination: AddressLike, payload_length: int) -> bytes:
    """Return a 20-byte IPv4 header for an OSPF payload; the checksum is left zero."""
    if payload_length < 0:
        raise ValueError("payload length must not be negative")
    total = IP_HEADER_LENGTH + payload_length
    if total > 0xFFFF:
        raise ValueError("packet too large for an IPv4 header")
    return _IP_HEADER.pack(
        (4 << 4) | 5,
        0,
        total,
        0,
        0,
        OSPF_TTL,
        OSPF_PROTOCOL,
        0,
        ipaddress.IPv4Address(source).packed,
        ipaddress.IPv4Address(destination).packed,
    )


class OspfSocket:
    """A raw socket bound to one interface, carrying OSPF packets."""

    def __init__(self, ifname: str, ip_addr: AddressLike, netmask: AddressLike = "0.0.0.0"):
        if not ifname or len(ifname) >= IFNAMSIZ:
            raise ValueError(f"invalid interface name {ifname!r}")
        self.ifname = ifname
        self.ip_addr = ipaddress.IPv4Address(ip_addr)
        self.netmask = ipaddress.IPv4Address(netmask)
        self.ifindex = 0
        self._sock: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def _require_open(self) -> socket.socket:
        if self._sock is None:
            raise OSError(errno.EBADF, f"socket on {self.ifname} is not open")
        return self._sock

    def open(self) -> None:
        """Create the raw socket and bind it to the interface."""
        family = getattr(socket, "AF_PACKET", None)
        if family is None:
            raise OSError(errno.EAFNOSUPPORT, "packet sockets are not supported here")
        sock = socket.socket(family, socket.SOCK_RAW, socket.htons(ETH_P_IP))
        try:
            self.ifindex = socket.if_nametoindex(self.ifname)
            sock.bind((self.ifname, ETH_P_IP))
            sock.setsockopt(socket.IPPROTO_IP, socket.IP_HDRINCL, 1)
        except OSError:
            sock.close()
            raise
        self._sock = sock

    def _membership(self, option: int) -> None:
        sock = self._require_open()
        for group in (ALL_SPF_ROUTERS, ALL_D_ROUTERS):
            mreq = _MREQN.pack(group.packed, self.ip_addr.packed, self.ifindex)
            sock.setsockopt(socket.IPPROTO_IP, option, mreq)

    def join_multicast(self) -> None:
        """Join the AllSPFRouters and AllDRouters groups."""
        self._membership(socket.IP_ADD_MEMBERSHIP)

    def leave_multicast(self) -> None:
        """Leave the AllSPFRouters and AllDRouters groups."""
        self._membership(socket.IP_DROP_MEMBERSHIP)

    def send(self, destination: AddressLike, payload: bytes) -> int:
        """Send *payload* behind an IPv4 header; return the number of bytes sent."""
        if not payload:
            raise ValueError("payload must not be empty")
        sock = self._require_open()
        frame = build_ip_header(self.ip_addr, destination, len(payload)) + bytes(payload)
        if len(frame) > MAX_FRAME:
            raise ValueError(f"frame of {len(frame)} bytes exceeds {MAX_FRAME}")
        address = (self.ifname, ETH_P_IP, 0, 0, bytes(ETH_ALEN))
        return sock.sendto(frame, address)

    def receive(self, bufsize: int = MAX_FRAME) -> bytes:
        """Receive one packet; return ``b""`` if none is ready or the call was interrupted."""
        if bufsize <= 0:
            raise ValueError("buffer size must be positive")
        sock = self._require_open()
        try:
            data, _ = sock.recvfrom(bufsize)
        except (BlockingIOError, InterruptedError):
            return b""
        return data

    def close(self) -> None:
        """Close the socket if it is open."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> "OspfSocket":
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()