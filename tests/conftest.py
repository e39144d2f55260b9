"""Pytest configuration and fixtures."""

from __future__ import annotations

import socket
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

_SRC = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(_SRC))

from pachost.context import PacContext  # noqa: E402

# Local timezone used by the fixed clocks: UTC+2.
LOCAL_TZ = timezone(timedelta(hours=2))

FAKE_DNS = {
    "www.example.com": ["93.184.216.34"],
    "intranet.corp.example.com": ["10.1.2.3", "10.1.2.4"],
    "v6only.example.com": ["2001:db8::1"],
}

FAKE_INTERFACES = {
    "lo": ["127.0.0.1"],
    "eth0": ["169.254.10.20", "192.168.1.10"],
    "wlan0": ["10.0.0.5"],
    "docker0": [],
}


def fake_lookup(host: str) -> list[str]:
    try:
        return list(FAKE_DNS[host])
    except KeyError:
        raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")


@pytest.fixture
def make_context():
    """Factory for contexts with a fixed clock, environment and network."""

    def _make(
        now: datetime = datetime(2024, 3, 4, 10, 30, 15, tzinfo=LOCAL_TZ),
        environ: dict | None = None,
        interfaces: dict | None = None,
        **kwargs,
    ) -> PacContext:
        table = FAKE_INTERFACES if interfaces is None else interfaces
        return PacContext(
            clock=lambda: now,
            environ={} if environ is None else environ,
            interfaces=lambda: {name: list(addrs) for name, addrs in table.items()},
            lookup=fake_lookup,
            **kwargs,
        )

    return _make


@pytest.fixture
def context(make_context) -> PacContext:
    """Context at Monday 2024-03-04 10:30:15 local (08:30:15 UTC)."""
    return make_context()


@pytest.fixture
def sample_config_yaml() -> str:
    """Sample config YAML for testing."""
    return """
myipaddress:
  env_var: MY_PAC_IP
  address: null
  interface: wlan0
"""
