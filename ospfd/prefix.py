"""IPv4 and IPv6 address prefixes and netmask conversion."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class PrefixFamily(Enum):
    """Address family of a prefix."""

    IPV4 = 4
    IPV6 = 6

    @property
    def max_prefixlen(self) -> int:
        return 32 if self is PrefixFamily.IPV4 else 128


def _mask(prefixlen: int, width: int) -> int:
    return ((1 << prefixlen) - 1) << (width - prefixlen)


@dataclass(frozen=True)
class Prefix:
    """An address together with a prefix length, e.g. ``192.168.1.0/24``."""

    family: PrefixFamily
    address: IPAddress
    prefixlen: int

    def __post_init__(self) -> None:
        expected = (
            ipaddress.IPv4Address
            if self.family is PrefixFamily.IPV4
            else ipaddress.IPv6Address
        )
        if not isinstance(self.address, expected):
            raise TypeError(f"address {self.address!r} does not match {self.family.name}")
        if not 0 <= self.prefixlen <= self.family.max_prefixlen:
            raise ValueError(
                f"prefix length {self.prefixlen} out of range for {self.family.name}"
            )

    @classmethod
    def ipv4(cls, address: str | int | bytes | ipaddress.IPv4Address, prefixlen: int) -> "Prefix":
        """Build an IPv4 prefix; the length must be 0..32."""
        return cls(PrefixFamily.IPV4, ipaddress.IPv4Address(address), prefixlen)

    @classmethod
    def ipv6(cls, address: str | int | bytes | ipaddress.IPv6Address, prefixlen: int) -> "Prefix":
        """Build an IPv6 prefix; the length must be 0..128."""
        return cls(PrefixFamily.IPV6, ipaddress.IPv6Address(address), prefixlen)

    def __str__(self) -> str:
        return f"{self.address}/{self.prefixlen}"

    def _masked(self, address: IPAddress, prefixlen: int) -> int:
        return int(address) & _mask(prefixlen, self.family.max_prefixlen)

    def same_network(self, other: "Prefix") -> bool:
        """True if both prefixes have the same family, length and network bits."""
        if self.family is not other.family or self.prefixlen != other.prefixlen:
            return False
        return self._masked(self.address, self.prefixlen) == self._masked(
            other.address, self.prefixlen
        )

    def contains(self, other: "Prefix") -> bool:
        """True if *other* lies entirely within this prefix."""
        if self.family is not other.family or self.prefixlen > other.prefixlen:
            return False
        return self._masked(self.address, self.prefixlen) == self._masked(
            other.address, self.prefixlen
        )


def prefixlen_to_netmask(prefixlen: int) -> ipaddress.IPv4Address:
    """Return the IPv4 netmask for a prefix length of 0..32."""
    if not 0 <= prefixlen <= 32:
        raise ValueError(f"prefix length {prefixlen} out of range for IPv4")
    return ipaddress.IPv4Address(_mask(prefixlen, 32))


def netmask_to_prefixlen(netmask: str | int | bytes | ipaddress.IPv4Address) -> int:
    """Return the prefix length of a contiguous IPv4 netmask."""
    value = int(ipaddress.IPv4Address(netmask))
    prefixlen = 0
    bit = 1 << 31
    while bit and value & bit:
        prefixlen += 1
        bit >>= 1
    if (value << prefixlen) & 0xFFFFFFFF:
        raise ValueError(f"invalid netmask {ipaddress.IPv4Address(value)}")
    return prefixlen