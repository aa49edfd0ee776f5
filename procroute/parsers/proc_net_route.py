"""Parse the text of /proc/net/route into RouteEntry records."""

from __future__ import annotations

import logging
import re
from typing import Callable

from procroute.errors import MalformedTableError, RouteParseError
from procroute.flag_decoder import decode_flags, hex_to_ipv4
from procroute.models import RouteEntry

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r"^[0-9A-Fa-f]+$")
_DEC_RE = re.compile(r"^-?\d+$")

REQUIRED_COLUMNS = ("Iface", "Gateway", "Flags")

# Assigns one raw column value into the keyword arguments of a RouteEntry.
ColumnSetter = Callable[[dict, str], None]


def _hex(value: str) -> int:
    if not _HEX_RE.match(value):
        raise ValueError("not a hexadecimal number")
    return int(value, 16)


def _dec(value: str) -> int:
    if not _DEC_RE.match(value):
        raise ValueError("not a decimal number")
    return int(value)


def _set_iface(row: dict, value: str) -> None:
    row["interface"] = value


def _set_destination(row: dict, value: str) -> None:
    hex_to_ipv4(value)
    row["destination_hex"] = value


def _set_gateway(row: dict, value: str) -> None:
    row["gateway"] = hex_to_ipv4(value)
    row["gateway_hex"] = value


def _set_mask(row: dict, value: str) -> None:
    hex_to_ipv4(value)
    row["mask_hex"] = value


def _set_flags(row: dict, value: str) -> None:
    # The kernel prints flags with "%04X".
    row["flags"] = decode_flags(_hex(value))


def _int_setter(field_name: str) -> ColumnSetter:
    def setter(row: dict, value: str) -> None:
        row[field_name] = _dec(value)
    return setter


COLUMN_SETTERS: dict[str, ColumnSetter] = {
    "Iface": _set_iface,
    "Destination": _set_destination,
    "Gateway": _set_gateway,
    "Flags": _set_flags,
    "RefCnt": _int_setter("ref_cnt"),
    "Use": _int_setter("use"),
    "Metric": _int_setter("metric"),
    "Mask": _set_mask,
    "MTU": _int_setter("mtu"),
    "Window": _int_setter("window"),
    "IRTT": _int_setter("irtt"),
}


def parse_header(line: str) -> list[str]:
    """
    Split the header row into column names.

    Empty cells are dropped: the kernel writes "Mask\\t\\tMTU" in the header
    but only one tab between those values in the data rows.
    """
    return [name.strip() for name in line.split("\t") if name.strip()]


def _build_dispatch(columns: list[str]) -> list[tuple[str, ColumnSetter | None]]:
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise MalformedTableError(f"route table header is missing column(s): {', '.join(missing)}")

    dispatch = []
    for name in columns:
        setter = COLUMN_SETTERS.get(name)
        if setter is None:
            logger.debug("Ignoring unknown route table column %r", name)
        dispatch.append((name, setter))
    return dispatch


def parse_row(dispatch: list[tuple[str, ColumnSetter | None]], line: str, lineno: int) -> RouteEntry:
    values = [v.strip() for v in line.rstrip().split("\t")]
    if len(values) != len(dispatch):
        raise MalformedTableError(
            f"line {lineno}: expected {len(dispatch)} columns, got {len(values)}"
        )

    row: dict = {}
    for (column, setter), value in zip(dispatch, values):
        if setter is None:
            continue
        try:
            setter(row, value)
        except ValueError as exc:
            raise RouteParseError(column, value, lineno, str(exc)) from exc
    return RouteEntry(**row)


def parse_table(raw_text: str) -> list[RouteEntry]:
    """
    Parse the full contents of /proc/net/route.

    The first non-blank line is the header; its column names decide which
    field each value lands in, so column order may differ between kernels.
    A header with no data rows yields an empty list.
    """
    lines = raw_text.splitlines()
    numbered = [(i, line) for i, line in enumerate(lines, start=1) if line.strip()]
    if not numbered:
        raise MalformedTableError("route table is empty")

    header_lineno, header = numbered[0]
    columns = parse_header(header)
    if "Iface" not in columns:
        raise MalformedTableError(f"line {header_lineno}: no route table header found")
    dispatch = _build_dispatch(columns)

    entries = [parse_row(dispatch, line, lineno) for lineno, line in numbered[1:]]
    logger.debug("Parsed %d route entries", len(entries))
    return entries
