"""Link-state advertisements: creation, aging, validation and encoding."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

from .log import get_logger

MAX_AGE = 3600

_HEADER = struct.Struct("!IIIIHHH")
HEADER_SIZE = _HEADER.size


class LsaType(IntEnum):
    """Kinds of link-state advertisement."""

    ROUTER = 0
    NETWORK = 1
    SUMMARY = 2
    AS_EXTERNAL = 3


class LsaError(ValueError):
    """Raised when an LSA cannot be encoded, decoded or accepted."""


@dataclass
class Lsa:
    """A link-state advertisement with its payload bytes."""

    type: LsaType
    link_state_id: int
    advertising_router: int
    sequence_number: int = 0
    age: int = 0
    checksum: int = 0
    data: bytes = b""

    @classmethod
    def create(cls, lsa_type: LsaType, link_state_id: int, advertising_router: int) -> "Lsa":
        """Return a fresh LSA with zero age, sequence number and checksum."""
        lsa = cls(LsaType(lsa_type), link_state_id, advertising_router)
        get_logger().debug(
            "LSA created - Type: %d, Link State ID: %u, Advertising Router: %u",
            lsa.type, link_state_id, advertising_router,
        )
        return lsa

    def length(self) -> int:
        """Length of the payload in bytes."""
        return len(self.data)

    def age_once(self) -> bool:
        """Advance the age by one second; return True if it was already at MaxAge."""
        if self.age < MAX_AGE:
            self.age += 1
            return False
        get_logger().debug("LSA ID %u expired and should be removed.", self.link_state_id)
        return True

    def validate(self) -> bool:
        """True if the 16-bit sum of the payload bytes equals the checksum."""
        calculated = sum(self.data) & 0xFFFF
        if calculated != self.checksum:
            get_logger().warn("LSA ID %u failed checksum validation.", self.link_state_id)
            return False
        return True

    def serialize(self) -> bytes:
        """Encode header fields in network byte order followed by the payload."""
        try:
            header = _HEADER.pack(
                int(self.type),
                self.link_state_id,
                self.advertising_router,
                self.sequence_number,
                self.age,
                self.checksum,
                len(self.data),
            )
        except struct.error as exc:
            raise LsaError(f"LSA field out of range: {exc}") from exc
        return header + bytes(self.data)

    @classmethod
    def deserialize(cls, data: bytes) -> "Lsa":
        """Decode an LSA produced by :meth:`serialize`; trailing bytes are ignored."""
        if len(data) < HEADER_SIZE:
            raise LsaError(
                f"LSA needs at least {HEADER_SIZE} bytes, got {len(data)}"
            )
        type_value, lsid, router, seq, age, checksum, length = _HEADER.unpack_from(data)
        try:
            lsa_type = LsaType(type_value)
        except ValueError as exc:
            raise LsaError(f"unknown LSA type {type_value}") from exc
        payload = bytes(data[HEADER_SIZE:HEADER_SIZE + length])
        if len(payload) != length:
            raise LsaError(
                f"LSA payload truncated: expected {length} bytes, got {len(payload)}"
            )
        return cls(lsa_type, lsid, router, seq, age, checksum, payload)