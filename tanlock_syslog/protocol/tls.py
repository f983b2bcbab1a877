# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# TLS Protocol implementation for the syslog emitter (RFC 5425)

# Standard library imports
import asyncio
import ssl

from typing import Dict, Optional

# Local/package imports
from tanlock_syslog.protocol.tcp import SyslogTCPProtocol


class SyslogTLSProtocol(SyslogTCPProtocol):
    """
    TLS Protocol implementation for sending syslog messages.

    This class extends the SyslogTCPProtocol and only adds logging of the
    negotiated TLS parameters and the collector certificate.
    """

    @property
    def logger_name(self) -> str:
        return "tanlock_syslog.protocol.tls"

    @property
    def net_transport(self) -> str:
        return "ip_tls"

    def on_connection_made(self, transport: asyncio.BaseTransport) -> None:
        host, port = self.peername[:2] if self.peername else ("unknown", "unknown")

        ssl_object = transport.get_extra_info("ssl_object")
        if ssl_object:
            cipher = ssl_object.cipher()
            self.logger.info(
                "TLS syslog connection established",
                extra={
                    "host": host,
                    "port": port,
                    "version": ssl_object.version(),
                    "cipher": cipher[0] if cipher else None,
                    "bits": cipher[2] if cipher else None,
                },
            )
            peer_cert = ssl_object.getpeercert()
            if peer_cert:
                self._log_certificate_info(peer_cert, host, port)
        else:
            self.logger.warning(
                "TLS connection established but SSL information is not available",
                extra={"host": host, "port": port},
            )

    def _log_certificate_info(self, cert: Dict, host: str, port: object) -> None:
        """
        Log information about the collector certificate.

        Args:
            cert: The certificate dictionary
            host: The collector host
            port: The collector port
        """
        subject = cert.get("subject", [])
        subject_str = ", ".join(
            [f"{name}={value}" for rdn in subject for (name, value) in rdn]
        )
        issuer = cert.get("issuer", [])
        issuer_str = ", ".join(
            [f"{name}={value}" for rdn in issuer for (name, value) in rdn]
        )

        self.logger.debug(
            "Collector certificate information",
            extra={
                "host": host,
                "port": port,
                "subject": subject_str,
                "issuer": issuer_str,
                "valid_from": cert.get("notBefore", "unknown"),
                "valid_to": cert.get("notAfter", "unknown"),
            },
        )


class TLSContextBuilder:
    """
    Helper class to build SSL contexts for syslog over TLS.
    """

    @staticmethod
    def create_client_context(
        ca_certs: Optional[str] = None,
        min_version: Optional[ssl.TLSVersion] = None,
    ) -> ssl.SSLContext:
        """
        Create an SSL context for connecting to a collector.

        Certificate and hostname validation use the platform defaults.

        Args:
            ca_certs: Optional CA bundle, the system trust store is used otherwise
            min_version: Optional minimum TLS version

        Returns:
            The configured SSL context
        """
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH, cafile=ca_certs)
        if min_version is not None:
            context.minimum_version = min_version
        return context
