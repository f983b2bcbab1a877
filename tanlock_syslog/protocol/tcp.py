# -*- coding: utf-8 -*-
# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# TCP Protocol implementation for the syslog emitter
# Standard library imports
import asyncio
import logging

from typing import Optional, Tuple


class SyslogTCPProtocol(asyncio.Protocol):
    """
    TCP Protocol implementation for sending syslog messages.

    Tracks whether the stream is still open. Once the collector closes the
    connection it stays closed: there is no reconnect.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.logger_name)
        self.transport: Optional[asyncio.Transport] = None
        self.peername: Optional[Tuple[str, int]] = None
        self.connected = False
        self._closed: Optional["asyncio.Future[None]"] = None

    @property
    def logger_name(self) -> str:
        return "tanlock_syslog.protocol.tcp"

    @property
    def net_transport(self) -> str:
        return "ip_tcp"

    def connection_made(self, transport: asyncio.BaseTransport) -> None:
        """
        Called when the connection to the collector is established.

        Args:
            transport: The transport for the connection
        """
        self.transport = transport  # type: ignore[assignment]
        self.peername = transport.get_extra_info("peername")
        self.connected = True
        self.on_connection_made(transport)

    def on_connection_made(self, transport: asyncio.BaseTransport) -> None:
        host, port = self.peername[:2] if self.peername else ("unknown", "unknown")
        self.logger.info(
            "TCP syslog connection established",
            extra={
                "net.transport": self.net_transport,
                "net.peer.ip": host,
                "net.peer.port": port,
            },
        )

    async def wait_closed(self) -> None:
        """Wait until connection_lost has been called."""
        if not self.connected:
            return
        if self._closed is None:
            self._closed = asyncio.get_running_loop().create_future()
        await self._closed

    def data_received(self, data: bytes) -> None:
        self.logger.debug(
            "Ignoring data from collector", extra={"message.length": len(data)}
        )

    def connection_lost(self, exc: Optional[Exception]) -> None:
        """
        Called when the connection is lost or closed.

        Args:
            exc: The exception that caused the connection to close,
                 or None if the connection was closed without an error
        """
        self.connected = False
        if self._closed is not None and not self._closed.done():
            self._closed.set_result(None)
        host, port = self.peername[:2] if self.peername else ("unknown", "unknown")
        if exc:
            self.logger.warning(
                "Syslog connection lost",
                extra={
                    "net.transport": self.net_transport,
                    "net.peer.ip": host,
                    "net.peer.port": port,
                    "error": exc,
                },
            )
        else:
            self.logger.info(
                "Syslog connection closed",
                extra={
                    "net.transport": self.net_transport,
                    "net.peer.ip": host,
                    "net.peer.port": port,
                },
            )
