"""Exception types raised while reading and interpreting the route table."""

from __future__ import annotations

from typing import Optional


class RouteTableError(Exception):
    """Base class for every route table failure."""


class RouteTableReadError(RouteTableError, OSError):
    """The route pseudo-file could not be opened or read."""


class MalformedTableError(RouteTableError, ValueError):
    """The table text has no usable header or a row does not fit it."""


class RouteParseError(RouteTableError, ValueError):
    """A single column value could not be parsed."""

    def __init__(self, column: str, value: str, line: Optional[int] = None, reason: str = ""):
        self.column = column
        self.value = value
        self.line = line
        self.reason = reason
        msg = f"invalid {column} value {value!r}"
        if line is not None:
            msg += f" on line {line}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)

    def __reduce__(self):
        return (self.__class__, (self.column, self.value, self.line, self.reason))


class GatewayNotFoundError(RouteTableError, LookupError):
    """No route carries both the Up and Gateway flags."""
