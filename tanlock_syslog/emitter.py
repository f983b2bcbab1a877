# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Syslog emitter: format, frame and send application events
#
# Used DOCS:
# https://tools.ietf.org/html/rfc5424   The Syslog Protocol
# https://tools.ietf.org/html/rfc6587   Transmission of Syslog Messages over TCP
# https://tools.ietf.org/html/rfc5425   TLS Transport Mapping for Syslog

# Standard library imports
import logging

from typing import Any, Mapping, Optional, Union

# Local/package imports
from tanlock_syslog.config import ConfigStore, SyslogConfig
from tanlock_syslog.errors import TransportInitError
from tanlock_syslog.message.formatter import SyslogMessageFormatter
from tanlock_syslog.message.payload import EventPayload
from tanlock_syslog.protocol.framing import frame
from tanlock_syslog.telemetry import get_tracer
from tanlock_syslog.transport import TransportManager

EMITTER_NAME = "SysLog"


class SyslogEmitter:
    """
    Event sink that forwards application events to a syslog collector.

    Syslog delivery is best-effort telemetry: transport failures are logged and
    never reach the event dispatcher. The only error raised by ``on_event`` is
    FormatError, so a malformed line is never put on the wire.
    """

    def __init__(
        self,
        config_store: Optional[ConfigStore] = None,
        transport: Optional[TransportManager] = None,
    ):
        """
        Initialize the emitter.

        Args:
            config_store: Store for the persisted configuration
            transport: Pre-built transport handle; one is created from the loaded
                configuration by init() when omitted
        """
        self.logger = logging.getLogger("tanlock_syslog.emitter")
        self.config_store = config_store or ConfigStore()
        self.config: SyslogConfig = self.config_store.config
        self.transport = transport
        self.formatter = self._build_formatter()

    def _build_formatter(self) -> SyslogMessageFormatter:
        return SyslogMessageFormatter(
            hostname=self.config.syslog_hostname,
            escape_values=self.config.sd_escape,
        )

    @staticmethod
    def name() -> str:
        return EMITTER_NAME

    @property
    def initialized(self) -> bool:
        return self.transport is not None and self.transport.initialized

    async def init(
        self, config: Optional[SyslogConfig] = None, tolerate_failure: bool = True
    ) -> None:
        """
        Load the configuration and open the transport.

        Args:
            config: Use this configuration instead of the persisted one
            tolerate_failure: Log transport failures and keep running without a
                transport (default). When False, TransportInitError is re-raised.

        Raises:
            TransportInitError: Only when ``tolerate_failure`` is False
        """
        self.config = config if config is not None else self.config_store.load()
        self.formatter = self._build_formatter()

        if self.transport is None:
            self.transport = TransportManager(self.config)

        try:
            await self.transport.start()
        except TransportInitError as e:
            self.logger.error(
                "Syslog transport unavailable, events will not be sent",
                extra={"error": str(e)},
            )
            if not tolerate_failure:
                raise

    def on_event(
        self, msg_type: str, body: Union[EventPayload, Mapping[str, Any]]
    ) -> None:
        """
        Format an event and send it to the collector.

        Args:
            msg_type: The event type, used as MSGID
            body: The event payload

        Raises:
            FormatError: If the event cannot be formatted
        """
        tracer = get_tracer()
        with tracer.start_as_current_span("syslog.emit") as span:
            syslog_msg = self.formatter.format(msg_type, body)
            span.set_attribute("syslog.msgid", msg_type.upper())

            if not self.initialized:
                self.logger.debug(
                    "Syslog emitter not initialized, message not sent",
                    extra={"msgid": msg_type.upper()},
                )
                return

            assert self.transport is not None
            span.set_attribute("syslog.transport", self.transport.kind.value)

            try:
                data = frame(syslog_msg, self.config, self.transport.kind)
                span.set_attribute("message.length", len(data))
                self.transport.send(data)
            except Exception as e:
                self.logger.error(
                    "Failed to send syslog message",
                    extra={"msgid": msg_type.upper(), "error": str(e)},
                )

    async def get_config(self) -> SyslogConfig:
        """Return the persisted configuration, or the default one."""
        return await self.config_store.get_config()

    def write_config(self, config: Union[SyslogConfig, Mapping[str, Any]]) -> None:
        """
        Replace the active configuration and persist it.

        The open transport is kept; transport changes take effect on the next init().
        """
        self.config_store.write(config)
        self.config = self.config_store.config
        self.formatter = self._build_formatter()

    @staticmethod
    def get_help() -> str:
        return ConfigStore.get_help()

    async def close(self) -> None:
        if self.transport is not None:
            await self.transport.close()
