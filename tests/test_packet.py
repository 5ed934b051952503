import pytest

from ospfd.packet import (
    HEADER_SIZE,
    HelloPacket,
    OspfHeader,
    calculate_checksum,
    create_hello_packet,
)

SOURCE_PACKET = bytes(
    [
        0x02, 0x01, 0x00, 0x24, 0xC0, 0xA8, 0x01, 0x01, 0x00, 0x00, 0x00, 0x01,
        0x12, 0x34, 0x00, 0x01, 0x00, 0x00, 0x00, 0x00,
    ]
)


def test_parse_header_from_source_case():
    header = OspfHeader.parse(SOURCE_PACKET + bytes(4))
    assert header.version == 2
    assert header.type == 1
    assert header.packet_length == 36
    assert header.router_id == 0xC0A80101
    assert header.area_id == 0x00000001
    assert header.checksum == 0x1234
    assert header.autype == 1
    assert header.authentication == 0


def test_parse_header_reads_authentication():
    data = SOURCE_PACKET[:16] + bytes([0, 0, 0, 1, 0, 0, 0, 2])
    assert OspfHeader.parse(data).authentication == (1 << 32) | 2


def test_parse_short_header_raises():
    with pytest.raises(ValueError):
        OspfHeader.parse(SOURCE_PACKET)


def test_create_hello_packet():
    hello = create_hello_packet(0xFFFFFF00, 10)
    assert hello.hello_interval == 10
    assert hello.network_mask == 0xFFFFFF00
    assert hello.header.version == 2
    assert hello.header.type == 1
    assert hello.neighbors == []


def test_hello_wire_encoding():
    wire = create_hello_packet(0xFFFFFF00, 10).to_bytes()
    assert wire[0] == 2
    assert wire[1] == 1
    assert wire[HEADER_SIZE:HEADER_SIZE + 4] == b"\xff\xff\xff\x00"
    assert wire[HEADER_SIZE + 4:HEADER_SIZE + 6] == b"\x00\x0a"


def test_hello_length_field_matches_encoding():
    hello = HelloPacket(neighbors=[0x01010101, 0x02020202])
    wire = hello.to_bytes()
    assert OspfHeader.parse(wire).packet_length == len(wire)
    assert wire[-4:] == b"\x02\x02\x02\x02"
    assert len(hello.to_bytes()) == len(HelloPacket().to_bytes()) + 8


def test_checksum_worked_example():
    data = bytes([0x00, 0x01, 0xF2, 0x03, 0xF4, 0xF5, 0xF6, 0xF7])
    assert calculate_checksum(data) == 0x220D


def test_checksum_of_empty_data():
    assert calculate_checksum(b"") == 0xFFFF


def test_checksum_verifies_to_zero():
    data = b"OSPF hello body!"
    checksum = calculate_checksum(data)
    assert calculate_checksum(data + checksum.to_bytes(2, "big")) == 0


def test_checksum_pads_odd_length():
    assert calculate_checksum(b"\x12\x34\x56") == calculate_checksum(b"\x12\x34\x56\x00")