"""Local address selection for myIpAddress().

Resolution order, first success wins:

1. An override value (config ``address``, the override environment
   variable, or config ``interface``) that is an IPv4 literal is returned
   as-is.
2. An override value that is not a literal names an interface; its first
   usable IPv4 address is returned.
3. Otherwise the *last* usable IPv4 address across all interfaces is
   returned.
4. If nothing is usable, UNDEFINED.

"Usable" means neither loopback nor link-local.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Iterable, List, Optional, Union

from pachost.context import PacContext, default_context
from pachost.resolver import parse_ipv4

logger = logging.getLogger(__name__)


class _Undefined:
    """Singleton standing in for the script engine's ``undefined``."""

    _instance: Optional[_Undefined] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"


UNDEFINED = _Undefined()


def is_usable(address: ipaddress.IPv4Address) -> bool:
    """Return True unless the address is loopback or link-local."""
    return not (address.is_loopback or address.is_link_local)


def usable_addresses(addresses: Iterable[str]) -> List[ipaddress.IPv4Address]:
    """Filter raw interface addresses down to usable IPv4 ones, in order."""
    result = []
    for raw in addresses:
        address = parse_ipv4(raw)
        if address is not None and is_usable(address):
            result.append(address)
    return result


def candidate_addresses(context: Optional[PacContext] = None) -> List[ipaddress.IPv4Address]:
    """All usable IPv4 addresses across interfaces, in enumeration order."""
    context = context or default_context()
    candidates: List[ipaddress.IPv4Address] = []
    for addresses in context.interfaces().values():
        candidates.extend(usable_addresses(addresses))
    return candidates


def _from_override(value: str, context: PacContext) -> Optional[str]:
    literal = parse_ipv4(value)
    if literal is not None:
        logger.debug("Using override address %s", literal)
        return str(literal)

    addresses = context.interfaces().get(value)
    if addresses is None:
        logger.debug("Override interface %s not found", value)
        return None

    usable = usable_addresses(addresses)
    if not usable:
        logger.debug("Override interface %s has no usable IPv4 address", value)
        return None

    logger.debug("Using %s from interface %s", usable[0], value)
    return str(usable[0])


def my_ip_address(context: Optional[PacContext] = None) -> Union[str, _Undefined]:
    """Return the machine's effective IPv4 address.

    Returns:
        Dotted-decimal address, or UNDEFINED if no address qualifies
    """
    context = context or default_context()

    override = context.myip_override()
    if override:
        selected = _from_override(override, context)
        if selected is not None:
            return selected

    candidates = candidate_addresses(context)
    if not candidates:
        logger.debug("No usable local IPv4 address")
        return UNDEFINED

    return str(candidates[-1])


__all__ = [
    "UNDEFINED",
    "is_usable",
    "usable_addresses",
    "candidate_addresses",
    "my_ip_address",
]
