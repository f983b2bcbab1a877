# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Exception types raised by the syslog emitter


class SyslogEmitterError(Exception):
    """Base class for all errors raised by the syslog emitter."""


class ConfigLoadError(SyslogEmitterError):
    """
    Raised when the persisted configuration is missing or cannot be parsed.

    The config store recovers from this locally by falling back to the default
    configuration; it is never surfaced to the caller.
    """


class TransportInitError(SyslogEmitterError):
    """
    Raised when the transport cannot be opened (connection refused, DNS failure,
    TLS handshake failure).
    """


class FormatError(SyslogEmitterError, ValueError):
    """Raised when an event payload cannot be rendered as an RFC 5424 line."""


class SendError(SyslogEmitterError):
    """Raised when a write on an open transport fails."""
