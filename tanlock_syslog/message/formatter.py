# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# RFC 5424 message formatter
#
# Builds <PRI>VERSION TIMESTAMP HOSTNAME APP-NAME PROCID MSGID STRUCTURED-DATA [MSG]
# from an event payload. See https://tools.ietf.org/html/rfc5424 section 6.

# Standard library imports
import logging
import os

from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional, Union

# Local/package imports
from tanlock_syslog.errors import FormatError
from tanlock_syslog.message.payload import EventPayload, coerce_payload
from tanlock_syslog.message.structured_data import encode_structured_data

# Facility: user-level messages (1); Severity: Notice (5)
SYSLOG_FACILITY = 1
SYSLOG_SEVERITY = 5
SYSLOG_PRI = SYSLOG_FACILITY * 8 + SYSLOG_SEVERITY
SYSLOG_VERSION = 1
SYSLOG_APP_NAME = "TANlockManager"
SYSLOG_PROCID = f"PID{os.getpid()}"
SYSLOG_NILVALUE = "-"
SYSLOG_BOM = "\ufeff"
MAX_MSGID_LENGTH = 32
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

logger = logging.getLogger("tanlock_syslog.message.formatter")


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise FormatError(f"Invalid timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        # Numeric timestamps are epoch milliseconds
        try:
            return EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError) as e:
            raise FormatError(f"Invalid timestamp: {value!r}") from e
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as e:
            raise FormatError(f"Invalid timestamp: {value!r}") from e
    else:
        raise FormatError(f"Invalid timestamp: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except (OverflowError, ValueError) as e:
        raise FormatError(f"Invalid timestamp: {value!r}") from e


def format_timestamp(value: Any) -> str:
    """
    Render a timestamp as ISO-8601 UTC with millisecond precision.

    Args:
        value: Epoch milliseconds, an ISO-8601 string or a datetime.

    Returns:
        A string like ``1970-01-01T00:00:00.000Z``.

    Raises:
        FormatError: If the value is not a parseable date.
    """
    dt = _parse_timestamp(value)
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        f".{dt.microsecond // 1000:03d}Z"
    )


class SyslogMessageFormatter:
    """
    Formats application events as RFC 5424 syslog lines.

    The static header fields (PRI, VERSION, APP-NAME, PROCID) are fixed for the
    emitter; the hostname comes from configuration.
    """

    def __init__(
        self,
        hostname: Optional[str] = None,
        app_name: str = SYSLOG_APP_NAME,
        procid: str = SYSLOG_PROCID,
        escape_values: bool = False,
    ):
        """
        Initialize the formatter.

        Args:
            hostname: HOSTNAME field, the nil value is used when unset or empty
            app_name: APP-NAME field
            procid: PROCID field
            escape_values: Escape structured data values per RFC 5424
        """
        self.hostname = hostname or SYSLOG_NILVALUE
        self.app_name = app_name
        self.procid = procid
        self.escape_values = escape_values

    def format(
        self, msg_type: str, body: Union[EventPayload, Mapping[str, Any]]
    ) -> str:
        """
        Build the syslog line for an event.

        Args:
            msg_type: The event type, used upper-cased as MSGID
            body: The event payload

        Returns:
            The formatted line (not framed, not encoded)

        Raises:
            FormatError: If the event cannot be rendered as a UTF-8 syslog line
        """
        if not isinstance(msg_type, str):
            raise FormatError(f"Invalid message type: {msg_type!r}")
        payload = coerce_payload(body)

        timestamp = format_timestamp(payload.timestamp)
        msg_id = msg_type.upper()
        if len(msg_id) > MAX_MSGID_LENGTH:
            logger.warning(
                "MSGID exceeds RFC 5424 maximum length",
                extra={"msgid": msg_id, "length": len(msg_id)},
            )

        syslog_msg = (
            f"<{SYSLOG_PRI}>{SYSLOG_VERSION} {timestamp} {self.hostname} "
            f"{self.app_name} {self.procid} {msg_id}"
        )

        structured_data = encode_structured_data(
            msg_type, payload, escape_values=self.escape_values
        )
        syslog_msg += f" {structured_data or SYSLOG_NILVALUE}"

        if payload.event_message is not None and str(payload.event_message) != "":
            syslog_msg += f" {SYSLOG_BOM}{payload.event_message}"

        # Lone surrogates cannot go on the wire
        try:
            syslog_msg.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FormatError(f"Message is not valid UTF-8: {e}") from e

        return syslog_msg


def format_message(
    msg_type: str,
    body: Union[EventPayload, Mapping[str, Any]],
    hostname: Optional[str] = None,
    escape_values: bool = False,
) -> str:
    """Format a single event with a throwaway formatter."""
    return SyslogMessageFormatter(hostname, escape_values=escape_values).format(
        msg_type, body
    )
