"""
Data models for the Linux IPv4 route table.

Each row of /proc/net/route becomes a RouteEntry. Raw hex columns are kept
as read; the gateway is decoded to dotted-quad at parse time and the other
addresses are decoded on access.
"""

from __future__ import annotations

import ipaddress

from pydantic import BaseModel, ConfigDict, Field


# --- Flag Models ---

class RouteFlag(BaseModel):
    """One bit of the kernel's RTF_* route flag mask."""
    model_config = ConfigDict(frozen=True)

    letter: str              # Symbol printed by `route -n` (U, G, H, ...)
    bit: int                 # Power-of-two mask value
    name: str
    description: str = ""


# --- Route Models ---

class RouteEntry(BaseModel):
    """A single row of the kernel routing table."""
    model_config = ConfigDict(frozen=True)

    interface: str = ""
    destination_hex: str = "00000000"
    gateway_hex: str = "00000000"
    gateway: str = "0.0.0.0"            # Decoded from gateway_hex
    flags: tuple[RouteFlag, ...] = Field(default_factory=tuple)
    ref_cnt: int = 0
    use: int = 0
    metric: int = 0
    mask_hex: str = "00000000"
    mtu: int = 0
    window: int = 0
    irtt: int = 0

    @property
    def destination(self) -> str:
        from procroute.flag_decoder import hex_to_ipv4
        return hex_to_ipv4(self.destination_hex)

    @property
    def mask(self) -> str:
        from procroute.flag_decoder import hex_to_ipv4
        return hex_to_ipv4(self.mask_hex)

    @property
    def network(self) -> ipaddress.IPv4Network:
        return ipaddress.IPv4Network(f"{self.destination}/{self.mask}", strict=False)

    @property
    def flag_names(self) -> list[str]:
        return [f.name for f in self.flags]

    @property
    def flag_letters(self) -> str:
        return "".join(f.letter for f in self.flags)

    def has_flag(self, flag: str) -> bool:
        """Match either a flag name ("Gateway") or its letter ("G")."""
        return any(f.name == flag or f.letter == flag for f in self.flags)

    @property
    def is_up(self) -> bool:
        return self.has_flag("Up")

    @property
    def is_gateway(self) -> bool:
        return self.has_flag("Gateway")

    @property
    def is_default(self) -> bool:
        return int(self.destination_hex, 16) == 0 and int(self.mask_hex, 16) == 0
