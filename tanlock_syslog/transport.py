# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Transport manager owning the single UDP, TCP or TLS connection to the collector

# Standard library imports
import asyncio
import logging
import ssl

from typing import Optional, Tuple, Union

# Local/package imports
from tanlock_syslog.config import SyslogConfig
from tanlock_syslog.errors import SendError, TransportInitError
from tanlock_syslog.protocol.framing_common import TransportKind
from tanlock_syslog.protocol.tcp import SyslogTCPProtocol
from tanlock_syslog.protocol.tls import SyslogTLSProtocol, TLSContextBuilder
from tanlock_syslog.protocol.udp import SyslogUDPProtocol


class TransportManager:
    """
    AsyncIO transport handle for the syslog emitter.

    Exactly one transport is opened by ``start()``, chosen from the configuration.
    It is never switched; a new manager is needed to change transports. A dropped
    stream connection is not re-established.
    """

    def __init__(
        self,
        config: SyslogConfig,
        ssl_context: Optional[ssl.SSLContext] = None,
    ):
        """
        Initialize the transport manager.

        Args:
            config: The syslog configuration
            ssl_context: SSL context for TLS, a default client context is built when omitted
        """
        self.logger = logging.getLogger("tanlock_syslog.transport")
        self.config = config
        self.kind: TransportKind = config.transport_kind
        self.ssl_context = ssl_context
        self.loop: Optional[asyncio.AbstractEventLoop] = None
        self.udp_transport: Optional[asyncio.DatagramTransport] = None
        self.udp_protocol: Optional[SyslogUDPProtocol] = None
        self.tcp_transport: Optional[asyncio.Transport] = None
        self.tcp_protocol: Optional[SyslogTCPProtocol] = None
        self.tls_transport: Optional[asyncio.Transport] = None
        self.tls_protocol: Optional[SyslogTLSProtocol] = None

    @property
    def transport(self) -> Optional[asyncio.BaseTransport]:
        """The live transport, or None before a successful start()."""
        if self.kind is TransportKind.UDP:
            return self.udp_transport
        if self.kind is TransportKind.TCP:
            return self.tcp_transport
        return self.tls_transport

    @property
    def initialized(self) -> bool:
        return self.transport is not None

    async def start(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        """
        Open the configured transport.

        Args:
            loop: Optional event loop to use

        Raises:
            TransportInitError: If the transport cannot be opened. The manager
                stays uninitialized and send() remains a no-op.
        """
        if self.initialized:
            self.logger.warning("Syslog transport already started")
            return

        self.loop = loop or asyncio.get_running_loop()
        host = self.config.host
        port = self.config.port

        self.logger.info(
            f"Opening {self.kind.value.upper()} syslog transport to {host}:{port}"
        )

        try:
            if self.kind is TransportKind.UDP:
                self.udp_transport, self.udp_protocol = await self.start_udp(host, port)
            elif self.kind is TransportKind.TCP:
                self.tcp_transport, self.tcp_protocol = await self.start_tcp(host, port)
            else:
                self.tls_transport, self.tls_protocol = await self.start_tls(host, port)
        except Exception as e:
            self.logger.error(
                "Failed to open syslog transport",
                extra={"host": host, "port": port, "error": str(e)},
            )
            raise TransportInitError(
                f"Failed to open {self.kind.value} syslog transport to {host}:{port}: {e}"
            ) from e

    async def start_udp(
        self, host: str, port: int
    ) -> Tuple[asyncio.DatagramTransport, SyslogUDPProtocol]:
        """
        Open a UDP endpoint connected to the collector, with broadcast enabled.

        Args:
            host: Collector address (the default is the broadcast address)
            port: Collector port

        Returns:
            Tuple of (transport, protocol)
        """
        assert self.loop is not None
        transport, protocol = await self.loop.create_datagram_endpoint(
            SyslogUDPProtocol,
            remote_addr=(host, port),
            allow_broadcast=True,
        )
        return transport, protocol

    async def start_tcp(
        self, host: str, port: int
    ) -> Tuple[asyncio.Transport, SyslogTCPProtocol]:
        """
        Open a persistent TCP connection to the collector.

        Args:
            host: Collector address
            port: Collector port

        Returns:
            Tuple of (transport, protocol)
        """
        assert self.loop is not None
        transport, protocol = await self.loop.create_connection(
            SyslogTCPProtocol, host, port
        )
        return transport, protocol

    async def start_tls(
        self, host: str, port: int
    ) -> Tuple[asyncio.Transport, SyslogTLSProtocol]:
        """
        Open a persistent TLS connection to the collector.

        Args:
            host: Collector address, also used for SNI and hostname validation
            port: Collector port

        Returns:
            Tuple of (transport, protocol)
        """
        assert self.loop is not None
        context = self.ssl_context or TLSContextBuilder.create_client_context()
        transport, protocol = await self.loop.create_connection(
            SyslogTLSProtocol,
            host,
            port,
            ssl=context,
            server_hostname=host,
        )
        return transport, protocol

    def send(self, data: Union[bytes, bytearray]) -> None:
        """
        Write already framed bytes to the collector.

        The write never blocks: stream data is buffered by the event loop and
        UDP datagrams are fire-and-forget.

        Args:
            data: The bytes to send

        Raises:
            SendError: If the connection is closed or the write fails
        """
        transport = self.transport
        if transport is None:
            self.logger.debug("Syslog transport not initialized, message dropped")
            return

        if transport.is_closing():
            raise SendError(f"{self.kind.value.upper()} syslog transport is closed")

        try:
            if self.kind is TransportKind.UDP:
                self.udp_transport.sendto(bytes(data))  # type: ignore[union-attr]
            else:
                transport.write(bytes(data))  # type: ignore[attr-defined]
        except (OSError, RuntimeError) as e:
            raise SendError(f"Failed to send syslog message: {e}") from e

    async def close(self) -> None:
        """Close the transport, flushing buffered stream data first."""
        transport = self.transport
        if transport is None:
            return

        transport.close()
        protocol = self.tls_protocol if self.kind is TransportKind.TLS else self.tcp_protocol
        if self.kind.is_stream and protocol is not None:
            await protocol.wait_closed()

        self.udp_transport = self.tcp_transport = self.tls_transport = None
        self.udp_protocol = None
        self.tcp_protocol = self.tls_protocol = None
        self.logger.info("Syslog transport closed")
