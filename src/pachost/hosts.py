"""Host name classification primitives.

Pure string tests on the host as given; no DNS, no case folding.
"""

from __future__ import annotations


def is_plain_host_name(host: str) -> bool:
    """Return True if the host has no domain part (no dot)."""
    return "." not in host


def dns_domain_is(host: str, domain: str) -> bool:
    """Return True if the host ends with the domain.

    This is a literal suffix test: "ahost.com" is in domain "host.com".
    """
    if len(host) < len(domain):
        return False
    return host.endswith(domain)


def local_host_or_domain_is(host: str, hostdom: str) -> bool:
    """Return True if host is hostdom, or the unqualified prefix of it.

    Args:
        host: Host name from the URL, qualified or not
        hostdom: Fully qualified host name to compare against

    Returns:
        True for an exact match, or when hostdom starts with host + "."
    """
    if host == hostdom:
        return True
    return hostdom.startswith(host + ".")


def dns_domain_levels(host: str) -> int:
    """Number of dots in the host name."""
    return host.count(".")


__all__ = [
    "is_plain_host_name",
    "dns_domain_is",
    "local_host_or_domain_is",
    "dns_domain_levels",
]
