"""Read the Linux IPv4 routing table from /proc/net/route as typed records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from procroute.collectors import LinuxRouteCollector
from procroute.config import DEFAULT_ROUTE_PATH, Settings, configure, get_settings, load_settings
from procroute.errors import (
    GatewayNotFoundError,
    MalformedTableError,
    RouteParseError,
    RouteTableError,
    RouteTableReadError,
)
from procroute.flag_decoder import ROUTE_FLAGS, decimal_to_ipv4, decode_flags, encode_flags, hex_to_ipv4
from procroute.gateway import find_default_route, gateway_address, interface_name
from procroute.models import RouteEntry, RouteFlag
from procroute.parsers import parse_table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"


def get_routing_table(path: Optional[str | Path] = None) -> list[RouteEntry]:
    """Read and parse the route table, in file order."""
    return LinuxRouteCollector(path).get_routing_table()


def find_default_gateway(path: Optional[str | Path] = None) -> str:
    """Return the dotted-quad address of the default gateway."""
    return gateway_address(find_default_route(get_routing_table(path)))


def find_default_gateway_interface(path: Optional[str | Path] = None) -> str:
    """Return the interface name the default gateway is reached through."""
    return interface_name(find_default_route(get_routing_table(path)))


__all__ = [
    "DEFAULT_ROUTE_PATH",
    "GatewayNotFoundError",
    "LinuxRouteCollector",
    "MalformedTableError",
    "ROUTE_FLAGS",
    "RouteEntry",
    "RouteFlag",
    "RouteParseError",
    "RouteTableError",
    "RouteTableReadError",
    "Settings",
    "configure",
    "decimal_to_ipv4",
    "decode_flags",
    "encode_flags",
    "find_default_gateway",
    "find_default_gateway_interface",
    "find_default_route",
    "gateway_address",
    "get_routing_table",
    "get_settings",
    "hex_to_ipv4",
    "interface_name",
    "load_settings",
    "parse_table",
]
