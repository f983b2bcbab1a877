# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# UDP Protocol implementation for the syslog emitter


# Standard library imports
import asyncio
import logging

from typing import Optional, Tuple


class SyslogUDPProtocol(asyncio.DatagramProtocol):
    """
    UDP Protocol implementation for sending syslog messages.

    The endpoint is connected to the collector address, so every message is a
    single datagram written with ``transport.sendto(data)``. Nothing is expected
    back; received datagrams are logged and ignored.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger("tanlock_syslog.protocol.udp")
        self.transport: Optional[asyncio.DatagramTransport] = None

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        """
        Called when the endpoint is ready.

        Args:
            transport: The transport for the endpoint
        """
        self.transport = transport  # type: ignore[assignment]
        peername = transport.get_extra_info("peername")
        if peername:
            host, port = peername[0], peername[1]
            self.logger.info(
                "UDP syslog endpoint ready",
                extra={
                    "net.transport": "ip_udp",
                    "net.peer.ip": host,
                    "net.peer.port": port,
                },
            )
        else:
            self.logger.info("UDP syslog endpoint ready", extra={"net.transport": "ip_udp"})

    def datagram_received(self, data: bytes, addr: Tuple[str, int]) -> None:
        self.logger.debug(
            "Ignoring datagram from collector",
            extra={"host": addr[0], "port": addr[1], "message.length": len(data)},
        )

    def error_received(self, exc: Exception) -> None:
        """
        Called when a previous send operation raises an OSError
        (e.g. ICMP port unreachable).

        Args:
            exc: The exception that was raised
        """
        self.logger.warning("Error on UDP syslog endpoint", extra={"error": exc})

    def connection_lost(self, exc: Optional[Exception]) -> None:
        """
        Called when the endpoint is closed.

        Args:
            exc: The exception that caused the close, or None
        """
        if exc:
            self.logger.debug(
                "UDP syslog endpoint closed with error",
                extra={"net.transport": "ip_udp", "error": exc},
            )
        else:
            self.logger.debug(
                "UDP syslog endpoint closed",
                extra={"net.transport": "ip_udp"},
            )
