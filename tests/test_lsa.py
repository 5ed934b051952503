import pytest

from ospfd.lsa import HEADER_SIZE, MAX_AGE, Lsa, LsaError, LsaType


def test_create_lsa_from_source_case():
    lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
    assert lsa.type is LsaType.ROUTER
    assert lsa.link_state_id == 1
    assert lsa.advertising_router == 0xC0A80101
    assert (lsa.sequence_number, lsa.age, lsa.checksum, lsa.length()) == (0, 0, 0, 0)


def test_aging_stops_at_max_age():
    lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
    for _ in range(3601):
        lsa.age_once()
    assert lsa.age == 3600
    assert MAX_AGE == 3600


def test_age_once_reports_expiry():
    lsa = Lsa(LsaType.NETWORK, 5, 6, age=MAX_AGE - 1)
    assert lsa.age_once() is False
    assert lsa.age == MAX_AGE
    assert lsa.age_once() is True
    assert lsa.age == MAX_AGE


def test_validate_empty_payload():
    assert Lsa.create(LsaType.ROUTER, 1, 0xC0A80101).validate() is True


def test_validate_checks_byte_sum():
    good = Lsa(LsaType.SUMMARY, 1, 2, checksum=6, data=b"\x01\x02\x03")
    bad = Lsa(LsaType.SUMMARY, 1, 2, checksum=7, data=b"\x01\x02\x03")
    assert good.validate() is True
    assert bad.validate() is False


def test_serialize_round_trip_from_source_case():
    lsa = Lsa.create(LsaType.ROUTER, 1, 0xC0A80101)
    for _ in range(3601):
        lsa.age_once()
    wire = lsa.serialize()
    assert len(wire) == HEADER_SIZE
    decoded = Lsa.deserialize(wire + bytes(1000))
    assert decoded.type == lsa.type
    assert decoded.link_state_id == lsa.link_state_id
    assert decoded.advertising_router == lsa.advertising_router
    assert decoded == lsa


def test_serialize_round_trip_with_payload():
    lsa = Lsa(LsaType.AS_EXTERNAL, 0x0A000000, 7, 42, 9, 6, b"\x01\x02\x03")
    wire = lsa.serialize()
    assert len(wire) == HEADER_SIZE + lsa.length()
    assert wire.endswith(b"\x01\x02\x03")
    assert Lsa.deserialize(wire) == lsa


def test_deserialize_too_short_raises():
    with pytest.raises(LsaError):
        Lsa.deserialize(bytes(HEADER_SIZE - 1))


def test_deserialize_truncated_payload_raises():
    wire = Lsa(LsaType.ROUTER, 1, 2, data=b"abcdef").serialize()
    with pytest.raises(LsaError):
        Lsa.deserialize(wire[:-2])


def test_deserialize_unknown_type_raises():
    wire = bytearray(Lsa(LsaType.ROUTER, 1, 2).serialize())
    wire[3] = 99
    with pytest.raises(LsaError):
        Lsa.deserialize(bytes(wire))


def test_serialize_out_of_range_field_raises():
    with pytest.raises(LsaError):
        Lsa(LsaType.ROUTER, 1 << 32, 2).serialize()