"""PAC host primitives bound to a single context.

A script engine registers each entry of PacFunctions.bindings() as a
global function before evaluating a PAC script:

    functions = PacFunctions()
    for name, func in functions.bindings().items():
        engine.add_callable(name, func)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple, Union

from pachost import hosts, local_address, resolver, shexp, temporal
from pachost.context import PacContext, default_context
from pachost.local_address import _Undefined

# Legacy names, in the order Netscape documented them.
PRIMITIVE_NAMES: Tuple[str, ...] = (
    "isPlainHostName",
    "dnsDomainIs",
    "localHostOrDomainIs",
    "isResolvable",
    "isInNet",
    "dnsResolve",
    "myIpAddress",
    "dnsDomainLevels",
    "shExpMatch",
    "weekdayRange",
    "dateRange",
    "timeRange",
)


class PacFunctions:
    """Capability object exposing every PAC host primitive."""

    def __init__(self, context: Optional[PacContext] = None) -> None:
        self._context = context or default_context()

    @property
    def context(self) -> PacContext:
        return self._context

    def isPlainHostName(self, host: str) -> bool:
        return hosts.is_plain_host_name(host)

    def dnsDomainIs(self, host: str, domain: str) -> bool:
        return hosts.dns_domain_is(host, domain)

    def localHostOrDomainIs(self, host: str, hostdom: str) -> bool:
        return hosts.local_host_or_domain_is(host, hostdom)

    def isResolvable(self, host: str) -> bool:
        return resolver.is_resolvable(host, self._context)

    def isInNet(self, host: str, pattern: str, mask: str) -> bool:
        return resolver.is_in_net(host, pattern, mask, self._context)

    def dnsResolve(self, host: str) -> str:
        return resolver.dns_resolve(host, self._context)

    def myIpAddress(self) -> Union[str, _Undefined]:
        return local_address.my_ip_address(self._context)

    def dnsDomainLevels(self, host: str) -> int:
        return hosts.dns_domain_levels(host)

    def shExpMatch(self, value: str, pattern: str) -> bool:
        return shexp.sh_exp_match(value, pattern)

    def weekdayRange(self, *args: Any) -> bool:
        return temporal.weekday_range(*args, context=self._context)

    def dateRange(self, *args: Any) -> bool:
        return temporal.date_range(*args, context=self._context)

    def timeRange(self, *args: Any) -> bool:
        """Raises BadArgumentCount for 3, 5 or more than 6 arguments."""
        return temporal.time_range(*args, context=self._context)

    def bindings(self) -> Dict[str, Callable[..., Any]]:
        """Map each legacy primitive name to its bound method."""
        return {name: getattr(self, name) for name in PRIMITIVE_NAMES}


__all__ = ["PacFunctions", "PRIMITIVE_NAMES"]
