"""Address allocator for one IPv4 subnet, kept as a binary trie of host bits."""

from __future__ import annotations

import ipaddress
from typing import Optional, Sequence, Union

ADDRESS_BITS = 32
ADDRESS_BYTES = 4

Address = Union[str, bytes, bytearray, Sequence[int]]


class DhcpError(Exception):
    """Raised when an address cannot be allocated or released."""


class _Node:
    __slots__ = ("full", "children")

    def __init__(self) -> None:
        self.full = False
        self.children: list[Optional[_Node]] = [None, None]


def _to_int(address: Address) -> int:
    if isinstance(address, str):
        return int(ipaddress.IPv4Address(address))
    raw = bytes(address)
    if len(raw) != ADDRESS_BYTES:
        raise ValueError("an address has exactly 4 bytes")
    return int.from_bytes(raw, "big")


class Dhcp:
    """Hands out the host addresses of a subnet, lowest free address first.

    The network address (host 0), the server address (the last host but one)
    and the broadcast address (the last host) are reserved at creation.
    """

    def __init__(self, subnet: Address, mask: int) -> None:
        if not 1 <= mask <= ADDRESS_BITS - 2:
            raise ValueError("mask must be between 1 and 30")
        self.mask = mask
        self._bits = ADDRESS_BITS - mask
        self._host_mask = (1 << self._bits) - 1
        self.network = _to_int(subnet) & ~self._host_mask & 0xFFFFFFFF
        self._root = _Node()
        self._allocated = 0
        self._reserved = (0, self._host_mask - 1, self._host_mask)
        for host in self._reserved:
            self._claim(self._root, self._bits, host, 0)
            self._allocated += 1

    def _claim(self, node: _Node, bits: int, lower: int, prefix: int) -> Optional[int]:
        """Mark the smallest free host not below ``lower`` as used and return it."""
        if node.full:
            return None
        if bits == 0:
            node.full = True
            return prefix
        wanted = (lower >> (bits - 1)) & 1
        rest = lower & ((1 << (bits - 1)) - 1)
        for side in (0, 1):
            if side < wanted:
                continue
            child = node.children[side]
            if child is None:
                child = node.children[side] = _Node()
            result = self._claim(child, bits - 1, rest if side == wanted else 0, prefix << 1 | side)
            if result is not None:
                left, right = node.children
                node.full = bool(left and left.full and right and right.full)
                return result
        return None

    def _host_of(self, address: Address) -> Optional[int]:
        value = _to_int(address)
        if value & ~self._host_mask & 0xFFFFFFFF != self.network:
            return None
        return value & self._host_mask

    def count_free(self) -> int:
        """Number of addresses still available."""
        return (1 << self._bits) - self._allocated

    def allocate_ip(self, requested: Optional[Address] = None) -> bytes:
        """Allocate ``requested`` if free, else the next free address above it,
        else the lowest free address. Returns the address as 4 bytes."""
        lower = 0
        if requested is not None:
            host = self._host_of(requested)
            if host is not None and host not in self._reserved:
                lower = host
        host = self._claim(self._root, self._bits, lower, 0)
        if host is None and lower:
            host = self._claim(self._root, self._bits, 0, 0)
        if host is None:
            raise DhcpError("no free addresses left")
        self._allocated += 1
        return (self.network | host).to_bytes(ADDRESS_BYTES, "big")

    def free_ip(self, ip: Address) -> None:
        """Return an allocated address to the pool."""
        host = self._host_of(ip)
        if host is None:
            raise DhcpError("address is outside the subnet")
        if host in self._reserved:
            raise DhcpError("address is reserved")
        path: list[_Node] = []
        node = self._root
        for shift in reversed(range(self._bits)):
            child = node.children[(host >> shift) & 1]
            if child is None:
                raise DhcpError("address is not allocated")
            path.append(node)
            node = child
        if not node.full:
            raise DhcpError("address is not allocated")
        node.full = False
        for ancestor in path:
            ancestor.full = False
        self._allocated -= 1