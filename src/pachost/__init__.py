"""pachost - host primitives for Proxy Auto-Configuration scripts."""

from pachost.errors import PacError, ResolutionError, BadArgumentCount
from pachost.config import PacHostConfig, MyIpAddressConfig, load_config
from pachost.context import PacContext, default_context
from pachost.hosts import (
    is_plain_host_name,
    dns_domain_is,
    local_host_or_domain_is,
    dns_domain_levels,
)
from pachost.resolver import resolve, is_resolvable, dns_resolve, is_in_net
from pachost.local_address import UNDEFINED, my_ip_address
from pachost.shexp import sh_exp_match
from pachost.temporal import TokenKind, classify, weekday_range, date_range, time_range
from pachost.functions import PacFunctions, PRIMITIVE_NAMES

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Errors
    "PacError",
    "ResolutionError",
    "BadArgumentCount",
    # Config
    "PacHostConfig",
    "MyIpAddressConfig",
    "load_config",
    # Context
    "PacContext",
    "default_context",
    # Host classifier
    "is_plain_host_name",
    "dns_domain_is",
    "local_host_or_domain_is",
    "dns_domain_levels",
    # Resolver
    "resolve",
    "is_resolvable",
    "dns_resolve",
    "is_in_net",
    # Local address
    "UNDEFINED",
    "my_ip_address",
    # Glob
    "sh_exp_match",
    # Temporal
    "TokenKind",
    "classify",
    "weekday_range",
    "date_range",
    "time_range",
    # Capability object
    "PacFunctions",
    "PRIMITIVE_NAMES",
]
