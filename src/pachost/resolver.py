"""IPv4 name resolution and netmask matching.

resolve() is the only function here that raises. The PAC-facing
primitives built on it collapse every failure into False or "".
"""

from __future__ import annotations

import ipaddress
import logging
from typing import Optional

from pachost.context import PacContext, default_context
from pachost.errors import ResolutionError

logger = logging.getLogger(__name__)


def parse_ipv4(value: str) -> Optional[ipaddress.IPv4Address]:
    """Parse a dotted-decimal IPv4 literal, or return None."""
    if not isinstance(value, str):
        return None
    try:
        return ipaddress.IPv4Address(value)
    except ValueError:
        return None


def resolve(host: str, context: Optional[PacContext] = None) -> ipaddress.IPv4Address:
    """Resolve a host name or literal to an IPv4 address.

    Args:
        host: DNS name or dotted-decimal IPv4 literal
        context: Ambient context providing the DNS lookup

    Returns:
        The literal itself, or the first IPv4 answer from DNS

    Raises:
        ResolutionError: if the host is empty, does not resolve, or has
            no IPv4 answer
    """
    if not host:
        raise ResolutionError(host, "empty host")

    literal = parse_ipv4(host)
    if literal is not None:
        return literal

    context = context or default_context()
    try:
        answers = context.lookup(host)
    except (OSError, UnicodeError, ValueError) as e:
        logger.debug("Lookup of %s failed: %s", host, e)
        raise ResolutionError(host, str(e)) from e

    for answer in answers:
        address = parse_ipv4(answer)
        if address is not None:
            return address

    logger.debug("Lookup of %s returned no IPv4 answer: %s", host, answers)
    raise ResolutionError(host)


def is_resolvable(host: str, context: Optional[PacContext] = None) -> bool:
    """Return True if the host resolves to an IPv4 address."""
    if not host:
        return False
    try:
        resolve(host, context)
    except ResolutionError:
        return False
    return True


def dns_resolve(host: str, context: Optional[PacContext] = None) -> str:
    """Return the host's IPv4 address as a string, or "" on failure."""
    try:
        return str(resolve(host, context))
    except ResolutionError:
        return ""


def is_in_net(
    host: str, pattern: str, mask: str, context: Optional[PacContext] = None
) -> bool:
    """Check whether the host's address matches a pattern under a mask.

    The mask has 255 in octets to compare and 0 in octets to ignore, e.g.
    is_in_net("192.168.1.5", "192.168.1.0", "255.255.255.0") is True.

    Args:
        host: DNS name or IPv4 literal
        pattern: IPv4 address to compare against
        mask: IPv4 netmask

    Returns:
        True if (address & mask) == pattern; False on any failure
    """
    try:
        address = resolve(host, context)
    except ResolutionError:
        return False

    mask_address = parse_ipv4(mask)
    if mask_address is None:
        return False

    pattern_address = parse_ipv4(pattern)
    if pattern_address is None:
        return False

    return int(address) & int(mask_address) == int(pattern_address)


__all__ = [
    "parse_ipv4",
    "resolve",
    "is_resolvable",
    "dns_resolve",
    "is_in_net",
]
