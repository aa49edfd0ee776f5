"""
Flag Decoder: Interpret the bitmask and address columns of /proc/net/route.

Flag bits (from include/uapi/linux/route.h):
- 0x01 U Up        route is usable
- 0x02 G Gateway   destination is reached through a gateway
- 0x04 H Host      target is a host, not a network
- 0x08 R Reinstate reinstated for dynamic routing
- 0x10 D Dynamic   created by a daemon or redirect
- 0x20 M Modified  modified by a redirect
- 0x40 A Addrconf  created by address autoconfiguration
- 0x80 C Cache     cache entry

Addresses are printed with "%08X" on the host's native integer, so on
little-endian hosts the first octet sits in the lowest byte.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable

from procroute.models import RouteFlag


ROUTE_FLAGS: tuple[RouteFlag, ...] = (
    RouteFlag(letter="U", bit=0x01, name="Up", description="Route is usable (interface is up)"),
    RouteFlag(letter="G", bit=0x02, name="Gateway", description="Destination is a gateway"),
    RouteFlag(letter="H", bit=0x04, name="Host", description="Target is a host (not a network)"),
    RouteFlag(letter="R", bit=0x08, name="Reinstate", description="Route was reinstated for dynamic routing"),
    RouteFlag(letter="D", bit=0x10, name="Dynamic", description="Route was dynamically created by daemon or redirect"),
    RouteFlag(letter="M", bit=0x20, name="Modified", description="Route was modified by redirect"),
    RouteFlag(letter="A", bit=0x40, name="Addrconf", description="Route created by address autoconf"),
    RouteFlag(letter="C", bit=0x80, name="Cache", description="Route is in cache"),
)

FLAGS_BY_NAME = MappingProxyType({f.name: f for f in ROUTE_FLAGS})
FLAGS_BY_LETTER = MappingProxyType({f.letter: f for f in ROUTE_FLAGS})

IPV4_MAX = 0xFFFFFFFF

_HEX_RE = re.compile(r"^[0-9A-Fa-f]{1,8}$")


def decode_flags(bits: int) -> tuple[RouteFlag, ...]:
    """
    Decode a route flag bitmask into the known flags it sets.

    Flags come back in ascending bit order. Bits outside the table
    (RTF_REJECT and friends) are ignored.
    """
    if bits < 0:
        raise ValueError(f"flag mask must be non-negative, got {bits}")
    return tuple(f for f in ROUTE_FLAGS if bits & f.bit)


def encode_flags(flags: Iterable[RouteFlag | str]) -> int:
    """OR together flags given as RouteFlag objects, names or letters."""
    bits = 0
    for flag in flags:
        if isinstance(flag, RouteFlag):
            bits |= flag.bit
            continue
        known = FLAGS_BY_NAME.get(flag) or FLAGS_BY_LETTER.get(flag)
        if known is None:
            raise ValueError(f"unknown route flag {flag!r}")
        bits |= known.bit
    return bits


def decimal_to_ipv4(value: int) -> str:
    """Render a 32-bit route table integer as dotted-quad, lowest byte first."""
    if not 0 <= value <= IPV4_MAX:
        raise ValueError(f"{value} is outside the 32-bit address range")
    return ".".join(str((value >> shift) & 0xFF) for shift in (0, 8, 16, 24))


def hex_to_ipv4(text: str) -> str:
    """Decode a hex column such as '0100000A' into '10.0.0.1'."""
    text = text.strip()
    if not _HEX_RE.match(text):
        raise ValueError(f"{text!r} is not a 32-bit hex value")
    return decimal_to_ipv4(int(text, 16))
