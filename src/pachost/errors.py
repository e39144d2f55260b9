"""Exceptions raised by PAC host primitives."""

from __future__ import annotations


class PacError(Exception):
    """Base class for pachost errors."""


class ResolutionError(PacError):
    """A host could not be resolved to an IPv4 address."""

    def __init__(self, host: str, reason: str = "no IPv4 address") -> None:
        super().__init__(f"cannot resolve {host!r}: {reason}")
        self.host = host
        self.reason = reason


class BadArgumentCount(PacError, TypeError):
    """A primitive was called with an unsupported number of arguments."""

    def __init__(self, function: str, count: int) -> None:
        super().__init__(f"{function}: bad number of arguments ({count})")
        self.function = function
        self.count = count


__all__ = ["PacError", "ResolutionError", "BadArgumentCount"]
