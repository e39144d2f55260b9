"""YAML configuration for pachost."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MYIP_ENV_VAR = "PACHOST_MYIPADDRESS"
CONFIG_ENV_VAR = "PACHOST_CONFIG"
DEFAULT_CONFIG_PATH = os.path.expanduser("~/.pachost/config.yaml")


def _require_mapping(value: Any, *, path: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Expected mapping for {path}, got {type(value).__name__}")
    return value


def _reject_unknown_keys(data: Dict[str, Any], allowed: set[str], *, path: str) -> None:
    unknown = set(data.keys()) - allowed
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown {path} field(s): {unknown_str}")


def _optional_str(value: Any, *, path: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{path} must be a string")
    return value or None


@dataclass
class MyIpAddressConfig:
    """Overrides for the local address selector."""

    env_var: str = DEFAULT_MYIP_ENV_VAR
    address: Optional[str] = None
    interface: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MyIpAddressConfig:
        """Create from dictionary."""
        _reject_unknown_keys(data, {"env_var", "address", "interface"}, path="myipaddress")
        env_var = data.get("env_var", DEFAULT_MYIP_ENV_VAR)
        if not isinstance(env_var, str) or not env_var:
            raise ValueError("myipaddress.env_var must be a non-empty string")
        return cls(
            env_var=env_var,
            address=_optional_str(data.get("address"), path="myipaddress.address"),
            interface=_optional_str(data.get("interface"), path="myipaddress.interface"),
        )


@dataclass
class PacHostConfig:
    """Complete pachost configuration."""

    myipaddress: MyIpAddressConfig = field(default_factory=MyIpAddressConfig)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> PacHostConfig:
        """Parse from YAML string."""
        try:
            data = yaml.safe_load(yaml_str) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config YAML: {e}") from e
        if not isinstance(data, dict):
            raise ValueError("Config YAML must be a mapping (YAML object)")

        _reject_unknown_keys(data, {"myipaddress"}, path="config")
        myip = _require_mapping(data.get("myipaddress"), path="config.myipaddress")
        return cls(myipaddress=MyIpAddressConfig.from_dict(myip))

    def to_yaml(self) -> str:
        """Export to YAML string."""
        data = {
            "myipaddress": {
                "env_var": self.myipaddress.env_var,
                "address": self.myipaddress.address,
                "interface": self.myipaddress.interface,
            },
        }
        return yaml.dump(data, default_flow_style=False, sort_keys=False)


def default_config_path() -> str:
    """Config path from PACHOST_CONFIG, else the per-user default."""
    return os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))


def load_config(path: Optional[str] = None) -> PacHostConfig:
    """Load configuration from a YAML file.

    A missing file at the default location yields the default config; a
    missing file that was asked for explicitly is an error.
    """
    explicit = path is not None
    path = os.path.expanduser(path) if explicit else default_config_path()
    if not os.path.exists(path):
        if explicit:
            raise ValueError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return PacHostConfig()

    logger.debug("Loading config from %s", path)
    with open(path, "r") as f:
        return PacHostConfig.from_yaml(f.read())


__all__ = [
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MYIP_ENV_VAR",
    "MyIpAddressConfig",
    "PacHostConfig",
    "default_config_path",
    "load_config",
]
