# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Tests for the field sanitizer

# Standard library imports
from types import SimpleNamespace

# Third-party imports
import pytest

# Local/package imports
from tanlock_syslog.message.sanitizer import (
    SLIMMERS,
    slim_cabinet,
    slim_cage,
    slim_lock,
    slim_row,
)


@pytest.mark.unit
class TestSanitizer:
    """Tests for the slim_* projection functions."""

    @pytest.mark.parametrize("slim", [slim_lock, slim_cabinet, slim_row, slim_cage])
    def test_none_passes_through(self, slim):
        assert slim(None) is None

    def test_slim_lock_drops_extra_fields(self):
        lock = {
            "id": 7,
            "ip": "10.0.0.7",
            "name": "L7",
            "state": "locked",
            "door_1": "closed",
            "door_2": "open",
            "password": "secret",
            "pin": 1234,
        }
        assert slim_lock(lock) == {
            "id": 7,
            "ip": "10.0.0.7",
            "name": "L7",
            "state": "locked",
            "door_1": "closed",
            "door_2": "open",
        }

    def test_slim_cabinet_keeps_key_order(self):
        cabinet = {"backLock": 6, "extra": "x", "frontLock": 5, "name": "C1", "id": 1}
        assert list(slim_cabinet(cabinet)) == ["id", "name", "frontLock", "backLock"]

    def test_slim_row(self):
        assert slim_row({"id": 3, "name": "R3", "cabinets": [1, 2]}) == {
            "id": 3,
            "name": "R3",
        }

    def test_slim_cage(self):
        assert slim_cage({"id": 4, "name": "G4", "color": "#ff0000", "rows": []}) == {
            "id": 4,
            "name": "G4",
            "color": "#ff0000",
        }

    def test_missing_fields_map_to_none(self):
        assert slim_cage({"id": 4}) == {"id": 4, "name": None, "color": None}

    def test_attribute_objects(self):
        row = SimpleNamespace(id=2, name="R2", secret="s")
        assert slim_row(row) == {"id": 2, "name": "R2"}

    def test_values_are_not_coerced(self):
        value = object()
        assert slim_row({"id": value, "name": 5})["id"] is value
        assert slim_row({"id": value, "name": 5})["name"] == 5

    def test_slimmers_order(self):
        assert [name for name, _ in SLIMMERS] == ["tanlock", "cabinet", "row", "cage"]
