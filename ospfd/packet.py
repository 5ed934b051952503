"""OSPF common header parsing, Hello packet construction and checksums."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, replace

OSPF_VERSION = 2
HELLO_TYPE = 1

_HEADER = struct.Struct("!BBHIIHHQ")
_HELLO_BODY = struct.Struct("!IHHHII")
_NEIGHBOR = struct.Struct("!I")

HEADER_SIZE = _HEADER.size
HELLO_BODY_SIZE = _HELLO_BODY.size


@dataclass
class OspfHeader:
    """The 24-byte header that starts every OSPF packet, with fields in host order."""

    version: int = OSPF_VERSION
    type: int = 0
    packet_length: int = 0
    router_id: int = 0
    area_id: int = 0
    checksum: int = 0
    autype: int = 0
    authentication: int = 0

    @classmethod
    def parse(cls, data: bytes) -> "OspfHeader":
        """Decode the header at the start of *data*; trailing bytes are ignored."""
        if len(data) < HEADER_SIZE:
            raise ValueError(
                f"OSPF header needs {HEADER_SIZE} bytes, got {len(data)}"
            )
        return cls(*_HEADER.unpack_from(data))

    def _pack(self) -> bytes:
        return _HEADER.pack(
            self.version,
            self.type,
            self.packet_length,
            self.router_id,
            self.area_id,
            self.checksum,
            self.autype,
            self.authentication,
        )


@dataclass
class HelloPacket:
    """An OSPF Hello packet: header, interface parameters and known neighbors."""

    header: OspfHeader = field(
        default_factory=lambda: OspfHeader(version=OSPF_VERSION, type=HELLO_TYPE)
    )
    network_mask: int = 0
    hello_interval: int = 0
    options: int = 0
    dead_interval: int = 0
    designated_router: int = 0
    backup_designated_router: int = 0
    neighbors: list[int] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        """Encode in network byte order; the header length is set to the real size."""
        body = _HELLO_BODY.pack(
            self.network_mask,
            self.hello_interval,
            self.options,
            self.dead_interval,
            self.designated_router,
            self.backup_designated_router,
        ) + b"".join(_NEIGHBOR.pack(neighbor) for neighbor in self.neighbors)
        header = replace(self.header, packet_length=HEADER_SIZE + len(body))
        return header._pack() + body


def create_hello_packet(network_mask: int, hello_interval: int) -> HelloPacket:
    """Return a version-2 Hello packet with the given mask and interval, all else zero."""
    return HelloPacket(
        header=OspfHeader(version=OSPF_VERSION, type=HELLO_TYPE),
        network_mask=network_mask,
        hello_interval=hello_interval,
    )


def calculate_checksum(data: bytes) -> int:
    """Return the 16-bit ones' complement checksum of *data*, odd length zero-padded."""
    padded = bytes(data)
    if len(padded) % 2:
        padded += b"\x00"
    total = sum(struct.unpack(f"!{len(padded) // 2}H", padded))
    while total >> 16:
        total = (total & 0xFFFF) + (total >> 16)
    return ~total & 0xFFFF