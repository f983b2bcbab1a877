# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Projection of domain objects onto the fields allowed on the wire
#
# Callers may hand over richer objects than the emitter intends to transmit.
# Only the allow-listed keys below ever reach the structured data encoder.

# Standard library imports
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple

LOCK_FIELDS: Tuple[str, ...] = ("id", "ip", "name", "state", "door_1", "door_2")
CABINET_FIELDS: Tuple[str, ...] = ("id", "name", "frontLock", "backLock")
ROW_FIELDS: Tuple[str, ...] = ("id", "name")
CAGE_FIELDS: Tuple[str, ...] = ("id", "name", "color")


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


def _project(obj: Any, fields: Tuple[str, ...]) -> Optional[Dict[str, Any]]:
    if obj is None:
        return None
    return {key: _field(obj, key) for key in fields}


def slim_lock(lock: Any) -> Optional[Dict[str, Any]]:
    """Reduce a lock to id, ip, name, state, door_1 and door_2."""
    return _project(lock, LOCK_FIELDS)


def slim_cabinet(cabinet: Any) -> Optional[Dict[str, Any]]:
    """Reduce a cabinet to id, name, frontLock and backLock."""
    return _project(cabinet, CABINET_FIELDS)


def slim_row(row: Any) -> Optional[Dict[str, Any]]:
    """Reduce a row to id and name."""
    return _project(row, ROW_FIELDS)


def slim_cage(cage: Any) -> Optional[Dict[str, Any]]:
    """Reduce a cage to id, name and color."""
    return _project(cage, CAGE_FIELDS)


# SD-ELEMENT name -> slimmer, in emission order
SLIMMERS: Tuple[Tuple[str, Callable[[Any], Optional[Dict[str, Any]]]], ...] = (
    ("tanlock", slim_lock),
    ("cabinet", slim_cabinet),
    ("row", slim_row),
    ("cage", slim_cage),
)
