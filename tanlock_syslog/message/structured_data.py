# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# RFC 5424 STRUCTURED-DATA encoder for application events

# Standard library imports
from typing import Any, Dict, List, Mapping, Optional, Union

# Local/package imports
from tanlock_syslog.message.payload import EventPayload, coerce_payload
from tanlock_syslog.message.sanitizer import SLIMMERS

# "Fath" in alphabet positions
PRIVATE_ENTERPRISE_NUMBER = "61208"


def escape_param_value(value: str) -> str:
    """
    Escape a PARAM-VALUE as required by RFC 5424 section 6.3.3.

    The characters '"', '\\' and ']' are prefixed with a backslash.
    """
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")


def render_value(value: Any) -> str:
    """Render a field value the way it is written inside the quotes."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_sd_element(
    name: str, params: Mapping[str, Any], escape_values: bool = False
) -> str:
    """
    Build a single SD-ELEMENT, e.g. ``[row@61208 id="1" name="R1"]``.

    Values are quoted as-is unless ``escape_values`` is set. Unescaped quotes or
    closing brackets inside a value produce a line strict parsers will reject.
    """
    parts = [f"{name}@{PRIVATE_ENTERPRISE_NUMBER}"]
    for key, value in params.items():
        text = render_value(value)
        if escape_values:
            text = escape_param_value(text)
        parts.append(f'{key}="{text}"')
    return "[" + " ".join(parts) + "]"


def encode_structured_data(
    msg_type: str,
    body: Union[EventPayload, Mapping[str, Any]],
    escape_values: bool = False,
) -> str:
    """
    Encode the structured data of an event.

    The event element is always present. The tanlock, cabinet, row and cage
    elements follow in that order, each only when the object is set on the body.

    Args:
        msg_type: The event type (unused by the encoder, kept for symmetry with
            the formatter).
        body: The event payload.
        escape_values: Apply RFC 5424 escaping to parameter values.

    Returns:
        The SD-ELEMENTs joined by single spaces. Never contains an empty element.
    """
    payload = coerce_payload(body)

    elements: List[str] = [
        format_sd_element(
            "event",
            {"event": payload.event, "eventId": payload.event_id},
            escape_values=escape_values,
        )
    ]
    for name, slim in SLIMMERS:
        slimmed: Optional[Dict[str, Any]] = slim(getattr(payload, name))
        if slimmed is None:
            continue
        elements.append(format_sd_element(name, slimmed, escape_values=escape_values))

    return " ".join(elements)
