# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Event payload model handed to the emitter by the event dispatcher

# Standard library imports
from typing import Any, Mapping, Optional, Union

# Third-party imports
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Local/package imports
from tanlock_syslog.errors import FormatError


class EventPayload(BaseModel):
    """
    An application event as delivered by the event dispatcher.

    Attributes:
        event (Any): Event name, e.g. "opened".
        event_id (Any): Event identifier (alias "eventId").
        event_message (Optional[Any]): Free text message (alias "eventMessage").
        timestamp (Any): Epoch milliseconds, ISO-8601 string or datetime.
        tanlock, cabinet, row, cage: Optional domain objects. They are kept as
            given and reduced to their allow-listed fields by the sanitizer.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    event: Any = None
    event_id: Any = Field(default=None, alias="eventId")
    event_message: Optional[Any] = Field(default=None, alias="eventMessage")
    timestamp: Any = None

    tanlock: Optional[Any] = None
    cabinet: Optional[Any] = None
    row: Optional[Any] = None
    cage: Optional[Any] = None


def coerce_payload(body: Union[EventPayload, Mapping[str, Any]]) -> EventPayload:
    """
    Return ``body`` as an EventPayload, validating plain mappings.

    Raises:
        FormatError: If ``body`` is not a mapping the model accepts.
    """
    if isinstance(body, EventPayload):
        return body
    try:
        return EventPayload.model_validate(body)
    except ValidationError as e:
        raise FormatError(f"Invalid event payload: {e}") from e
