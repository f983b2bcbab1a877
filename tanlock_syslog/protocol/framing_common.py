# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Common module for framing-related enums shared by the framer, config and transports

# Standard library imports
from enum import Enum


class TransportKind(Enum):
    """
    Enumeration for the transport used to deliver syslog messages.

    Values:
        UDP: One datagram per message, no framing.
        TCP: Plain TCP stream (RFC 6587).
        TLS: TLS-wrapped TCP stream (RFC 5425).
    """

    UDP = "udp"
    TCP = "tcp"
    TLS = "tls"

    @classmethod
    def from_flags(cls, use_tcp: bool, tcp_tls: bool) -> "TransportKind":
        """Select the transport from the useTCP/tcpTLS configuration flags."""
        if tcp_tls:
            return cls.TLS
        if use_tcp:
            return cls.TCP
        return cls.UDP

    @property
    def is_stream(self) -> bool:
        return self is not TransportKind.UDP


class FramingMode(Enum):
    """
    Enumeration for the syslog message framing mode.

    Values:
        NONE: No framing, the message is sent verbatim (UDP).
        TRANSPARENT: Octet-counting framing (RFC 6587 3.4.1, each message prefixed with length).
        NON_TRANSPARENT: Delimiter-based framing (RFC 6587 3.4.2, trailing marker).
    """

    NONE = "none"
    TRANSPARENT = "transparent"
    NON_TRANSPARENT = "non_transparent"
