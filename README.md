# ospfd

Building blocks for an OSPF router, with a small daemon that ties them
together. The package covers these pieces:

- the OSPF common header, Hello packets and the ones' complement checksum
- link-state advertisements and an in-memory link-state database
- neighbor state tracking, flood decisions, areas, the routing table and AS-external routes
- raw-socket I/O and interface discovery on Linux

It uses only the standard library.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the daemon

```
ospfd [CONFIG_FILE]
```

The daemon does the following:

1. It loads the configuration and prints it.
2. It applies the configuration, which checks that the Hello and dead intervals are positive.
3. It sets up empty route and area tables.
4. It runs its event loop until it receives SIGINT or SIGTERM.
5. It shuts down, discarding any queued work.

The event loop reads `(lsa, interface_id)` pairs from `Daemon.inbox`. Each pair
goes to the link-state database. When no item arrives within the poll timeout,
which defaults to 1 second, the loop runs its periodic work. That work refreshes
the route table and floods any pending LSAs to neighbors in TWO_WAY state or later.

The same steps can be driven from code:

```python
import threading
from ospfd.daemon import Daemon
from ospfd.lsa import Lsa, LsaType

daemon = Daemon("ospf.conf")
daemon.initialize()
worker = threading.Thread(target=daemon.run, kwargs={"poll_timeout": 0.1})
worker.start()
daemon.inbox.put((Lsa.create(LsaType.ROUTER, 1, 0xC0A80101), 0))
daemon.stop()          # finishes after items already queued
worker.join()
dropped = daemon.shutdown()
```

## Using the library

### Packets

```python
from ospfd.packet import OspfHeader, create_hello_packet, calculate_checksum

header = OspfHeader.parse(raw_bytes)      # needs at least 24 bytes
hello = create_hello_packet(0xFFFFFF00, 10)
wire = hello.to_bytes()                   # header length set to the real size
checksum = calculate_checksum(wire)
```

### LSAs and the link-state database

```python
from ospfd.lsa import Lsa, LsaType
from ospfd.lsdb import LinkStateDatabase

lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
copy = Lsa.deserialize(lsa.serialize())

lsdb = LinkStateDatabase(1024)
lsdb.add(lsa)
found = lsdb.lookup(1, 0xC0A80101)
lsdb.process(copy, interface_id=2)   # True if new or newer, then queued for flooding
print(lsdb.dump())
```

Each method handles its own cases as follows:

- `Lsa.age_once()` advances the age up to `MAX_AGE` (3600).
- `Lsa.validate()` compares the 16-bit byte sum of the payload with `checksum`.
- `LinkStateDatabase.process` raises `LsaError` for an LSA that fails validation.
- `LinkStateDatabase.add` raises `LsdbFullError` when a new key does not fit.

### Prefixes

```python
from ospfd.prefix import Prefix, prefixlen_to_netmask, netmask_to_prefixlen

net = Prefix.ipv4("192.168.1.0", 24)
sub = Prefix.ipv4("192.168.1.128", 25)
assert net.contains(sub)
print(net)                               # 192.168.1.0/24
prefixlen_to_netmask(24)                 # IPv4Address('255.255.255.0')
netmask_to_prefixlen("255.255.255.0")    # 24
```

`Prefix.ipv6` works the same way, and `same_network` compares two prefixes of
equal length. The constructors, `prefixlen_to_netmask` and `netmask_to_prefixlen`
all raise `ValueError` in these cases:

- a prefix length that is out of range
- a netmask that is not contiguous

### Routes, areas, neighbors

```python
from ospfd.route import RouteTable
from ospfd.area import AreaTable
from ospfd.neighbor import NeighborTable, NeighborState

table = RouteTable(256)
table.add("192.168.1.0", "192.168.1.1", 10, 24)
print(table.format())
table.remove("192.168.1.0", 24)          # KeyError if absent

areas = AreaTable()
areas.add(0, is_stub=False)              # ValueError on duplicate ID

neighbors = NeighborTable(10)
neighbor = neighbors.add(1, None)        # first DOWN slot, now INIT
neighbor.update_state(NeighborState.TWO_WAY)
neighbors.remove(1)
```

`ospfd.flood` holds the flooding functions:

- `flood_lsa` returns the IDs of the neighbors an LSA goes to.
- `handle_lsa_ack` handles an acknowledgement from a neighbor.
- `retransmit_lsa` resends an LSA to one neighbor.

`ospfd.ase` defines `OspfInstance`, which pairs a router ID with a route table and
an LSDB. It also defines `ExternalRoute`. `update_ase_route` installs or refreshes
an external route. It originates an AS-external LSA when the route is new or its
metric changed.

### Raw sockets and interfaces

On Linux, `ospfd.rawsocket.OspfSocket` opens an `AF_PACKET` raw socket on an
interface. This needs root. The socket can do the following:

- join and leave 224.0.0.5 and 224.0.0.6
- send a payload behind an IPv4 header built by `build_ip_header`, with protocol 89 and TTL 1
- receive packets

`ospfd.interface.discover_interfaces` lists the local interfaces that have an IPv4 address.

### Utilities

The package also provides these helpers:

- `ospfd.log`: a leveled logger. Its output looks like `[INFO] message`, written to standard output, and the default level is INFO.
- `ospfd.buffer`: a growable byte buffer with a read cursor.
- `ospfd.command`: a registry of named command handlers.
- `ospfd.memory`: a thread-safe pool of fixed-size blocks.

## What it does not do

- The configuration file is named but not read. `load_config` always returns
  the built-in defaults: area 0, interface `eth0`, Hello 10, dead 40.
- The daemon does not open sockets. It only processes LSAs placed on its inbox.
  It does not run Hello exchanges or adjacency formation on the wire.
- Flooding does not send anything. It records which neighbors an LSA would go to.
- There is no shortest-path calculation. `RouteTable.update` returns the routes
  as they stand.
- Routes are kept in the package's own table. They are never installed in the
  kernel routing table.