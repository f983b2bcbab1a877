# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Tests for the outgoing framing helper

# Third-party imports
import pytest

# Local/package imports
from tanlock_syslog.config import SyslogConfig
from tanlock_syslog.protocol.framing import (
    add_octet_count,
    add_trailer,
    frame,
    parse_end_of_msg_marker,
    select_framing_mode,
)
from tanlock_syslog.protocol.framing_common import FramingMode, TransportKind

MESSAGE = '<13>1 1970-01-01T00:00:00.000Z - TANlockManager PID1 DOOR [event@61208 event="opened" eventId="42"]'


@pytest.mark.unit
class TestFramingModeSelection:
    """Tests for select_framing_mode."""

    def test_udp(self):
        assert select_framing_mode(SyslogConfig()) == FramingMode.NONE

    def test_tcp_octet_counting(self):
        config = SyslogConfig(useTCP=True, tcpOC=True)
        assert select_framing_mode(config) == FramingMode.TRANSPARENT

    def test_tcp_non_transparent(self):
        config = SyslogConfig(useTCP=True, tcpOC=False)
        assert select_framing_mode(config) == FramingMode.NON_TRANSPARENT

    @pytest.mark.parametrize("use_tcp", [True, False])
    def test_tls_always_octet_counting(self, use_tcp):
        config = SyslogConfig(useTCP=use_tcp, tcpTLS=True, tcpOC=False)
        assert config.transport_kind == TransportKind.TLS
        assert select_framing_mode(config) == FramingMode.TRANSPARENT

    def test_live_transport_overrides_config(self):
        config = SyslogConfig(useTCP=True, tcpOC=False)
        assert select_framing_mode(config, TransportKind.UDP) == FramingMode.NONE


@pytest.mark.unit
class TestFrame:
    """Tests for frame and its helpers."""

    def test_udp_unchanged(self):
        assert frame(MESSAGE, SyslogConfig()) == MESSAGE.encode("utf-8")

    def test_tcp_octet_count(self):
        data = frame(MESSAGE, SyslogConfig(useTCP=True))
        expected_length = len(MESSAGE.encode("utf-8"))
        assert data == f"{expected_length} {MESSAGE}".encode("utf-8")

    def test_tls_octet_count(self):
        data = frame(MESSAGE, SyslogConfig(tcpTLS=True, tcpOC=False))
        assert data.startswith(f"{len(MESSAGE)} <13>".encode("utf-8"))

    def test_octet_count_uses_utf8_length(self):
        message = "\ufefftür geöffnet"
        framed = add_octet_count(message)
        assert framed == f"{len(message.encode('utf-8'))} {message}"
        assert len(message.encode("utf-8")) != len(message)

    def test_tcp_non_transparent(self):
        config = SyslogConfig(useTCP=True, tcpOC=False, tcpNonTransparentFramingChar="\n")
        data = frame(MESSAGE, config)
        assert data == (MESSAGE + "\n").encode("utf-8")
        assert data.count(b"\n") == 1
        assert not data.startswith(f"{len(MESSAGE)} ".encode("utf-8"))

    def test_tcp_custom_trailer(self):
        config = SyslogConfig(useTCP=True, tcpOC=False, tcpNonTransparentFramingChar="\\0")
        assert frame(MESSAGE, config).endswith(b"\x00")

    def test_add_trailer_default(self):
        assert add_trailer("abc") == "abc\n"

    def test_frame_does_not_mutate_config(self):
        config = SyslogConfig(useTCP=True, tcpOC=False)
        before = config.model_dump()
        frame(MESSAGE, config)
        assert config.model_dump() == before


@pytest.mark.unit
class TestParseEndOfMsgMarker:
    """Tests for parse_end_of_msg_marker."""

    @pytest.mark.parametrize(
        "marker,expected",
        [
            ("\\n", "\n"),
            ("\\r\\n", "\r\n"),
            ("\\0", "\0"),
            ("\\x00", "\x00"),
            ("\\t", "\t"),
            ("\n", "\n"),
            ("|", "|"),
        ],
    )
    def test_valid_markers(self, marker, expected):
        assert parse_end_of_msg_marker(marker) == expected

    def test_empty_marker(self):
        with pytest.raises(ValueError):
            parse_end_of_msg_marker("")

    def test_invalid_escape(self):
        with pytest.raises(ValueError):
            parse_end_of_msg_marker("\\x")
