import pytest

from mpscan.scan import (
    Address,
    ScanFlags,
    Summary,
    format_ports,
    format_targets,
    parse_ports,
    parse_targets,
)


def test_port_list_print_format():
    assert format_ports([22, 80, 443]) == "22,80,443"


def test_port_list_out_of_range_ports_dropped():
    ports = []
    for value in ["0", "22", "80", "70000"]:
        ports.extend(parse_ports(value))
    assert format_ports(ports) == "22,80"


def test_target_list_print_format():
    assert format_targets(["example.com", "localhost"]) == "example.com,localhost"


def test_parse_ports_comma_separated():
    assert parse_ports("22,80,443") == [22, 80, 443]


def test_parse_ports_skips_garbage_and_reads_leading_numbers():
    assert parse_ports("22, 80,abc,443x,,65536,65535") == [22, 80, 443, 65535]


def test_parse_targets_splits_on_commas():
    assert parse_targets("localhost,scanme.nmap.org") == ["localhost", "scanme.nmap.org"]


def test_targets_round_trip():
    targets = ["a.example.com", "b.example.com", "127.0.0.1"]
    assert parse_targets(format_targets(targets)) == targets


def test_add_port_keeps_sorted_order_and_count():
    summary = Summary(hostname="localhost")
    for port in [443, 22, 80]:
        summary.add_port(port)
    assert summary.open_ports == [22, 80, 443]
    assert summary.open_port_count == 3


def test_summary_string_format():
    summary = Summary(hostname="localhost", total_ports_scanned=3, open_ports=[22, 80], time_taken=1.5)
    assert str(summary) == (
        "[localhost]\n"
        "Total Ports Scanned: 3\n"
        "Open Ports Count: 2\n"
        "Open Ports: [22 80]\n"
        "Time Taken: 1.500s"
    )


def test_summary_string_with_no_open_ports():
    summary = Summary(hostname="example.com", total_ports_scanned=10)
    assert "Open Ports: []\n" in str(summary)
    assert "Open Ports Count: 0\n" in str(summary)


def test_summary_to_dict():
    summary = Summary(hostname="localhost", total_ports_scanned=5, open_ports=[22], time_taken=2.0)
    assert summary.to_dict() == {
        "Hostname": "localhost",
        "TotalPortsScanned": 5,
        "OpenPortCount": 1,
        "OpenPorts": [22],
        "TimeTaken": 2_000_000_000,
    }


def test_summary_to_dict_without_open_ports():
    assert Summary(hostname="localhost").to_dict()["OpenPorts"] is None


@pytest.mark.parametrize(
    "address, expected",
    [
        (Address("localhost", 80), "localhost:80"),
        (Address("127.0.0.1", 22), "127.0.0.1:22"),
        (Address("::1", 443), "[::1]:443"),
    ],
)
def test_address_string(address, expected):
    assert str(address) == expected


def test_scan_flags_defaults():
    flags = ScanFlags(target="localhost")
    assert (flags.start_port, flags.end_port, flags.workers, flags.timeout, flags.ports) == (
        1,
        1024,
        100,
        5,
        [],
    )