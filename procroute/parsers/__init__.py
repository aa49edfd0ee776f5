"""Parsers for the kernel's route table export."""

from .proc_net_route import parse_table, parse_header

__all__ = ["parse_table", "parse_header"]
