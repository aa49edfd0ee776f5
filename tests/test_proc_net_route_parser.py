"""Tests for the /proc/net/route table parser."""

import re
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from procroute.errors import MalformedTableError, RouteParseError, RouteTableError
from procroute.parsers import parse_header, parse_table


FIXTURE_PATH = Path(__file__).parent / "fixtures" / "proc-net-route.txt"

HEADER = "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\t\tMTU\tWindow\tIRTT"
IP_RE = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}$")


def load_fixture() -> str:
    return FIXTURE_PATH.read_text()


def table(*rows: str, header: str = HEADER) -> str:
    return "\n".join([header, *rows]) + "\n"


class TestKernelFixture:

    def setup_method(self):
        self.entries = parse_table(load_fixture())

    def test_row_count(self):
        assert len(self.entries) == 5

    def test_preserves_row_order(self):
        assert [e.interface for e in self.entries] == ["eth0", "docker0", "eth0", "wg0", "eth0"]
        assert [e.destination_hex for e in self.entries] == [
            "00000000", "000011AC", "0001A8C0", "0000000A", "0A01A8C0",
        ]

    def test_default_route(self):
        default = self.entries[0]
        assert default.gateway == "192.168.1.1"
        assert default.gateway_hex == "0101A8C0"
        assert default.flag_names == ["Up", "Gateway"]
        assert default.metric == 100
        assert default.is_default

    def test_all_gateways_are_dotted_quads(self):
        for e in self.entries:
            assert IP_RE.match(e.gateway), e.gateway

    def test_columns_after_double_tab_line_up(self):
        wg = self.entries[3]
        assert wg.mask_hex == "000000FF"
        assert wg.mtu == 1420
        assert wg.window == 0
        assert wg.irtt == 0

    def test_counters_are_not_truncated(self):
        assert self.entries[4].metric == 600

    def test_host_route_flags(self):
        assert self.entries[4].flag_letters == "UGH"

    def test_padding_stripped(self):
        assert all(" " not in e.interface for e in self.entries)


class TestHeaderDriven:

    def test_header_names(self):
        assert parse_header(HEADER) == [
            "Iface", "Destination", "Gateway", "Flags", "RefCnt", "Use",
            "Metric", "Mask", "MTU", "Window", "IRTT",
        ]

    def test_permuted_columns(self):
        header = "Gateway\tIface\tFlags\tMetric\tDestination\tMask"
        entries = parse_table(table("0100000A\teth1\t0003\t5\t00000000\t00000000", header=header))
        assert len(entries) == 1
        e = entries[0]
        assert e.interface == "eth1"
        assert e.gateway == "10.0.0.1"
        assert e.metric == 5
        assert e.flag_names == ["Up", "Gateway"]

    def test_unknown_column_ignored(self):
        header = "Iface\tGateway\tFlags\tColour"
        entries = parse_table(table("eth0\t00000000\t0001\tblue", header=header))
        assert entries[0].interface == "eth0"

    def test_missing_columns_keep_defaults(self):
        header = "Iface\tGateway\tFlags"
        e = parse_table(table("eth0\t0100000A\t0003", header=header))[0]
        assert e.mtu == 0
        assert e.mask_hex == "00000000"

    def test_flags_are_hex(self):
        header = "Iface\tGateway\tFlags"
        e = parse_table(table("eth0\t00000000\t0011", header=header))[0]
        assert e.flag_names == ["Up", "Dynamic"]


class TestEdgeCases:

    def test_header_only(self):
        assert parse_table(HEADER + "\n") == []

    def test_blank_lines_skipped(self):
        text = "\n" + table("eth0\t00000000\t0100000A\t0003\t0\t0\t0\t00000000\t0\t0\t0") + "\n\n"
        assert len(parse_table(text)) == 1

    def test_empty_input(self):
        with pytest.raises(MalformedTableError):
            parse_table("")

    def test_whitespace_only(self):
        with pytest.raises(MalformedTableError):
            parse_table("   \n\n")

    def test_missing_header(self):
        with pytest.raises(MalformedTableError):
            parse_table("eth0\t00000000\t0100000A\t0003\t0\t0\t0\t00000000\t0\t0\t0\n")

    def test_required_column_missing(self):
        with pytest.raises(MalformedTableError, match="Flags"):
            parse_table(table("eth0\t00000000", header="Iface\tGateway"))

    def test_short_row(self):
        with pytest.raises(MalformedTableError):
            parse_table(table("eth0\t00000000\t0100000A"))

    def test_bad_gateway(self):
        with pytest.raises(RouteParseError) as exc_info:
            parse_table(table("eth0\t00000000\tnot-hex\t0003\t0\t0\t0\t00000000\t0\t0\t0"))
        err = exc_info.value
        assert err.column == "Gateway"
        assert err.value == "not-hex"
        assert err.line == 2
        assert "Gateway" in str(err) and "not-hex" in str(err)

    def test_bad_metric(self):
        with pytest.raises(RouteParseError) as exc_info:
            parse_table(table("eth0\t00000000\t0100000A\t0003\t0\t0\tlots\t00000000\t0\t0\t0"))
        assert exc_info.value.column == "Metric"

    def test_bad_flags(self):
        with pytest.raises(RouteParseError) as exc_info:
            parse_table(table("eth0\t00000000\t0100000A\tUG\t0\t0\t0\t00000000\t0\t0\t0"))
        assert exc_info.value.column == "Flags"

    def test_errors_share_base(self):
        with pytest.raises(RouteTableError):
            parse_table("")
