"""Collectors: read the route table from the running system."""

from .linux_collector import LinuxRouteCollector

__all__ = ["LinuxRouteCollector"]
