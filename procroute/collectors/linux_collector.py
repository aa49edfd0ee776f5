"""
Linux Collector: Read /proc/net/route and hand it to the table parser.

Every call performs one fresh read; nothing is cached between calls.
"""

import logging
from pathlib import Path
from typing import Optional

from procroute.config import get_settings
from procroute.errors import RouteTableReadError
from procroute.models import RouteEntry
from procroute.parsers import parse_table

logger = logging.getLogger(__name__)


class LinuxRouteCollector:
    """Collect IPv4 routes from the kernel route pseudo-file."""

    def __init__(self, path: Optional[str | Path] = None):
        self.path = Path(path) if path is not None else get_settings().route_path

    def read(self) -> str:
        """Return the raw table text, raising RouteTableReadError on I/O failure."""
        try:
            with open(self.path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.error(f"[{self.path}] read failed: {e}")
            raise RouteTableReadError(e.errno, e.strerror or str(e), str(self.path)) from e

    def get_routing_table(self) -> list[RouteEntry]:
        """Read and parse the route table."""
        entries = parse_table(self.read())
        logger.info(f"[{self.path}] {len(entries)} routes")
        return entries
