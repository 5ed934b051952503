import threading
import time

import pytest

from ospfd.daemon import Daemon
from ospfd.lsa import Lsa, LsaType
from ospfd.neighbor import NeighborState


def test_initialize_loads_config(capsys):
    daemon = Daemon("test.conf")
    config = daemon.initialize()
    out = capsys.readouterr().out
    assert config.hello_interval == 10
    assert config.dead_interval == 40
    assert daemon.config is config
    assert "  Interface: eth0" in out.splitlines()
    assert len(daemon.route_table) == 0


def test_run_processes_queued_lsa_then_stops():
    daemon = Daemon("test.conf")
    lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
    daemon.inbox.put((lsa, 3))
    daemon.stop()
    daemon.run(poll_timeout=5)
    assert daemon.processed == 1
    assert daemon.lsdb.lookup(1, 0xC0A80101) == lsa
    assert daemon.lsdb.pending_floods[0][1] == 3


def test_invalid_lsa_is_not_stored():
    daemon = Daemon("test.conf")
    lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
    lsa.checksum = 5
    daemon.inbox.put((lsa, 0))
    daemon.stop()
    daemon.run(poll_timeout=5)
    assert daemon.processed == 1
    assert len(daemon.lsdb) == 0


def test_idle_loop_floods_pending_lsas():
    daemon = Daemon("test.conf")
    neighbor = daemon.neighbors.add(7, None)
    neighbor.update_state(NeighborState.TWO_WAY)
    daemon.inbox.put((Lsa.create(LsaType.ROUTER, 1, 0xC0A80101), 0))
    worker = threading.Thread(target=daemon.run, args=(0.01,))
    worker.start()
    time.sleep(0.2)
    daemon.stop()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert daemon.periodic_runs >= 1
    assert daemon.flooded_to == [7]
    assert daemon.lsdb.pending_floods == []


def test_run_rejects_non_positive_timeout():
    daemon = Daemon("test.conf")
    with pytest.raises(ValueError):
        daemon.run(poll_timeout=0)


def test_shutdown_drops_queued_work():
    daemon = Daemon("test.conf")
    daemon.inbox.put((Lsa.create(LsaType.ROUTER, 1, 0xC0A80101), 0))
    daemon.inbox.put((Lsa.create(LsaType.ROUTER, 2, 0xC0A80101), 0))
    assert daemon.shutdown() == 2
    assert daemon.inbox.empty()