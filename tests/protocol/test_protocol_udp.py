# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Tests for the UDP protocol implementation

# Standard library imports
import logging

from unittest.mock import MagicMock

# Third-party imports
import pytest

# Local/package imports
from tanlock_syslog.protocol.udp import SyslogUDPProtocol


@pytest.mark.unit
class TestSyslogUDPProtocol:
    """Tests for the SyslogUDPProtocol class."""

    def test_init(self):
        """Test initialization of the protocol."""
        protocol = SyslogUDPProtocol()

        assert protocol.logger.name == "tanlock_syslog.protocol.udp"
        assert protocol.transport is None

    def test_connection_made(self, caplog):
        """Test connection_made method."""
        caplog.set_level(logging.INFO)
        protocol = SyslogUDPProtocol()

        mock_transport = MagicMock()
        mock_transport.get_extra_info.return_value = ("127.0.0.1", 514)

        protocol.connection_made(mock_transport)

        assert protocol.transport == mock_transport
        mock_transport.get_extra_info.assert_called_with("peername")
        assert "UDP syslog endpoint ready" in caplog.text

    def test_connection_made_no_peer_info(self, caplog):
        """Test connection_made method when peer info is not available."""
        caplog.set_level(logging.INFO)
        protocol = SyslogUDPProtocol()

        mock_transport = MagicMock()
        mock_transport.get_extra_info.return_value = None

        protocol.connection_made(mock_transport)

        assert protocol.transport == mock_transport
        assert "UDP syslog endpoint ready" in caplog.text

    def test_datagram_received_is_ignored(self, caplog):
        caplog.set_level(logging.DEBUG)
        protocol = SyslogUDPProtocol()

        protocol.datagram_received(b"unexpected", ("127.0.0.1", 514))

        assert "Ignoring datagram from collector" in caplog.text

    def test_error_received(self, caplog):
        """Test error_received method."""
        caplog.set_level(logging.WARNING)
        protocol = SyslogUDPProtocol()

        protocol.error_received(ConnectionRefusedError("port unreachable"))

        assert "Error on UDP syslog endpoint" in caplog.text

    def test_connection_lost(self, caplog):
        """Test connection_lost method with and without an error."""
        caplog.set_level(logging.DEBUG)
        protocol = SyslogUDPProtocol()

        protocol.connection_lost(None)
        assert "UDP syslog endpoint closed" in caplog.text

        protocol.connection_lost(OSError("boom"))
        assert "UDP syslog endpoint closed with error" in caplog.text
