# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Framing helper for outgoing syslog messages

# Standard library imports
import codecs

from typing import TYPE_CHECKING, Optional

# Local/package imports
from tanlock_syslog.protocol.framing_common import FramingMode, TransportKind

if TYPE_CHECKING:
    # Local/package imports
    from tanlock_syslog.config import SyslogConfig

# Constants
DEFAULT_END_OF_MSG_MARKER = "\n"


def add_octet_count(message: str) -> str:
    """
    Prefix a message with its UTF-8 byte length (RFC 6587 octet counting).

    Args:
        message: The formatted syslog message

    Returns:
        ``"<byte-length> " + message``
    """
    count = len(message.encode("utf-8"))
    return f"{count} {message}"


def add_trailer(message: str, end_of_msg_marker: str = DEFAULT_END_OF_MSG_MARKER) -> str:
    """Append the non-transparent framing marker to a message."""
    return f"{message}{end_of_msg_marker}"


def select_framing_mode(
    config: "SyslogConfig", transport: Optional[TransportKind] = None
) -> FramingMode:
    """
    Pick the framing for a message.

    TLS always uses octet counting; plain TCP follows ``tcpOC``; UDP is unframed.

    Args:
        config: The active syslog configuration
        transport: The live transport, derived from ``config`` when omitted

    Returns:
        The framing mode to apply
    """
    kind = transport or config.transport_kind
    if kind is TransportKind.UDP:
        return FramingMode.NONE
    if kind is TransportKind.TLS or config.tcp_oc:
        return FramingMode.TRANSPARENT
    return FramingMode.NON_TRANSPARENT


def frame(
    message: str, config: "SyslogConfig", transport: Optional[TransportKind] = None
) -> bytes:
    """
    Apply the transport-dependent framing and encode the result as UTF-8.

    Args:
        message: The formatted syslog message
        config: The active syslog configuration
        transport: The live transport, derived from ``config`` when omitted

    Returns:
        The bytes to put on the wire
    """
    mode = select_framing_mode(config, transport)
    if mode == FramingMode.TRANSPARENT:
        message = add_octet_count(message)
    elif mode == FramingMode.NON_TRANSPARENT:
        message = add_trailer(message, config.tcp_non_transparent_framing_char)
    return message.encode("utf-8")


def parse_end_of_msg_marker(marker_str: str) -> str:
    """
    Parse a string representation of an end-of-message marker.

    Handles escape sequences like \\n, \\r, \\t, \\0, and hex sequences (\\x00).
    Strings holding the real control characters are returned unchanged.

    Args:
        marker_str: String representation of the marker

    Returns:
        The marker with escape sequences resolved

    Raises:
        ValueError: If the marker string is empty or invalid
    """
    if not marker_str:
        raise ValueError("End-of-message marker must not be empty")

    # Special handling for common escape sequences
    if marker_str == "\\n":
        return "\n"
    elif marker_str == "\\r\\n":
        return "\r\n"
    elif marker_str == "\\0":
        return "\0"

    if "\\" not in marker_str:
        return marker_str

    try:
        return codecs.decode(marker_str, "unicode_escape")
    except UnicodeError as e:
        raise ValueError(f"Invalid end-of-message marker: {marker_str}") from e
