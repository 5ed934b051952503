"""The OSPF daemon: initialization, event loop and shutdown."""

from __future__ import annotations

import queue
import signal
import sys

from .area import AreaTable
from .config import OspfConfig, load_config
from .flood import flood_lsa
from .log import get_logger
from .lsa import LsaError
from .lsdb import LinkStateDatabase
from .neighbor import NeighborTable
from .route import RouteTable

DEFAULT_CONFIG_FILE = "../../config/ospf_d.conf.sample"
DEFAULT_POLL_TIMEOUT = 1.0

_STOP = object()


class Daemon:
    """Runs the OSPF protocol: incoming LSAs are queued on ``inbox``."""

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        self.config_file = config_file
        self.config: OspfConfig | None = None
        self.route_table = RouteTable()
        self.area_table = AreaTable()
        self.lsdb = LinkStateDatabase()
        self.neighbors = NeighborTable()
        self.inbox: queue.SimpleQueue = queue.SimpleQueue()
        self.processed = 0
        self.periodic_runs = 0
        self.flooded_to: list[int] = []

    def initialize(self) -> OspfConfig:
        """Load and apply the configuration and reset the routing and area tables."""
        print("Initializing OSPF Daemon...")
        config = load_config(self.config_file)
        print("Loaded OSPF Configuration:")
        for line in config.describe().splitlines():
            print(f"  {line}")
        config.apply()
        self.config = config
        self.route_table = RouteTable()
        self.area_table = AreaTable()
        return config

    def _handle_incoming(self, item: tuple) -> None:
        lsa, interface_id = item
        try:
            self.lsdb.process(lsa, interface_id)
        except LsaError as exc:
            get_logger().error("%s", exc)
        self.processed += 1

    def _periodic(self) -> None:
        self.route_table.update()
        pending, self.lsdb.pending_floods = self.lsdb.pending_floods, []
        for lsa, _ in pending:
            self.flooded_to.extend(flood_lsa(lsa, self.neighbors))
        self.periodic_runs += 1

    def run(self, poll_timeout: float = DEFAULT_POLL_TIMEOUT) -> None:
        """Process queued LSAs, doing periodic work whenever *poll_timeout* passes idle."""
        if poll_timeout <= 0:
            raise ValueError("poll timeout must be positive")
        while True:
            try:
                item = self.inbox.get(timeout=poll_timeout)
            except queue.Empty:
                self._periodic()
                continue
            if item is _STOP:
                break
            self._handle_incoming(item)

    def stop(self) -> None:
        """Ask the event loop to finish after the items already queued."""
        self.inbox.put(_STOP)

    def shutdown(self) -> int:
        """Discard queued work and pending floods; return how many items were dropped."""
        print("Shutting down OSPF Daemon...")
        dropped = 0
        while True:
            try:
                item = self.inbox.get_nowait()
            except queue.Empty:
                break
            if item is not _STOP:
                dropped += 1
        dropped += len(self.lsdb.pending_floods)
        self.lsdb.pending_floods.clear()
        return dropped


def main(argv: list[str] | None = None) -> int:
    """Start the daemon with an optional configuration file argument."""
    args = sys.argv[1:] if argv is None else argv
    config_file = args[0] if args else DEFAULT_CONFIG_FILE
    print("OSPF Daemon Starting...")
    daemon = Daemon(config_file)

    def _handle_signal(signum: int, frame: object) -> None:
        daemon.stop()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    daemon.initialize()
    daemon.run()
    daemon.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())