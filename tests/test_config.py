import pytest

from ospfd.config import OspfConfig, load_config, update_config


def test_load_config_defaults():
    config = load_config("ospf.conf")
    assert config.area_id == 0
    assert config.interface == "eth0"
    assert (config.hello_interval, config.dead_interval) == (10, 40)


def test_load_config_returns_fresh_object():
    first = load_config("ospf.conf")
    first.area_id = 9
    second = load_config("ospf.conf")
    assert second.area_id == 0
    assert second is not first


def test_describe_lines():
    config = OspfConfig(area_id=3, interface="eth1")
    lines = config.describe().splitlines()
    assert len(lines) == 5
    assert lines[0] == "Area ID: 3"
    assert lines[1] == "Interface: eth1"


def test_apply_prints(capsys):
    config = OspfConfig(hello_interval=5, dead_interval=20)
    config.apply()
    out = capsys.readouterr().out
    assert "Hello Interval: 5" in out
    assert "Dead Interval: 20" in out


def test_apply_rejects_bad_interval():
    with pytest.raises(ValueError):
        OspfConfig(hello_interval=0).apply()


def test_update_config(capsys):
    config = update_config()
    out = capsys.readouterr().out
    assert config == OspfConfig()
    assert config.describe() in out