"""Ambient, read-only facts consulted by PAC host primitives.

Every primitive that depends on the outside world (clock, environment,
interface table, DNS) reads it through a PacContext. The default context
reads the live process state; tests build one with fixed values.
"""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Optional

import psutil

from pachost.config import DEFAULT_MYIP_ENV_VAR, PacHostConfig


def local_now() -> datetime:
    """Current time as an aware datetime in the system timezone."""
    return datetime.now().astimezone()


def system_interfaces() -> Dict[str, List[str]]:
    """IPv4 addresses bound to each network interface, in OS order."""
    return {
        name: [addr.address for addr in addrs if addr.family == socket.AF_INET]
        for name, addrs in psutil.net_if_addrs().items()
    }


def system_lookup(host: str) -> List[str]:
    """Forward IPv4 lookup through the system resolver.

    Raises:
        OSError: (usually socket.gaierror) if the name does not resolve
    """
    infos = socket.getaddrinfo(host, None, socket.AF_INET, socket.SOCK_STREAM)
    return [info[4][0] for info in infos]


@dataclass
class PacContext:
    """Context passed to primitives for evaluation."""

    clock: Callable[[], datetime] = local_now
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    interfaces: Callable[[], Dict[str, List[str]]] = system_interfaces
    lookup: Callable[[str], List[str]] = system_lookup
    myip_env_var: str = DEFAULT_MYIP_ENV_VAR
    myip_address: Optional[str] = None
    myip_interface: Optional[str] = None

    @classmethod
    def from_config(cls, config: PacHostConfig) -> PacContext:
        """Create a live context honoring a loaded configuration."""
        return cls(
            myip_env_var=config.myipaddress.env_var,
            myip_address=config.myipaddress.address,
            myip_interface=config.myipaddress.interface,
        )

    def now(self, gmt: bool = False) -> datetime:
        """Current wall-clock fields as a naive datetime.

        Args:
            gmt: Use UTC fields instead of local ones

        Returns:
            Naive datetime holding local (or UTC) year..microsecond
        """
        current = self.clock()
        if current.tzinfo is None:
            current = current.astimezone()
        if gmt:
            current = current.astimezone(timezone.utc)
        return current.replace(tzinfo=None)

    def myip_override(self) -> Optional[str]:
        """Override value for myIpAddress, if one is configured."""
        if self.myip_address:
            return self.myip_address
        value = self.environ.get(self.myip_env_var)
        if value:
            return value
        return self.myip_interface or None


_default_context: Optional[PacContext] = None


def default_context() -> PacContext:
    """Shared live context used when a caller does not pass one."""
    global _default_context
    if _default_context is None:
        _default_context = PacContext()
    return _default_context


__all__ = [
    "PacContext",
    "default_context",
    "local_now",
    "system_interfaces",
    "system_lookup",
]
