"""Pick the default gateway out of a parsed route table."""

from __future__ import annotations

from typing import Iterable

from procroute.errors import GatewayNotFoundError
from procroute.models import RouteEntry


def find_default_route(entries: Iterable[RouteEntry]) -> RouteEntry:
    """Return the first entry, in table order, flagged both Up and Gateway."""
    for entry in entries:
        if entry.is_up and entry.is_gateway:
            return entry
    raise GatewayNotFoundError("could not locate default gateway")


def gateway_address(entry: RouteEntry) -> str:
    return entry.gateway


def interface_name(entry: RouteEntry) -> str:
    return entry.interface
