# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Pytest configuration file

# Standard library imports
import logging

# Third-party imports
import pytest

# Local/package imports
from tanlock_syslog.config import SyslogConfig


# Define test categories
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark a test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark a test as an integration test"
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test."""
    yield
    # Reset root logger after each test
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.WARNING)  # Default level


@pytest.fixture
def door_event():
    """The front door event used throughout the tests."""
    return {
        "event": "opened",
        "eventId": "42",
        "timestamp": 0,
        "eventMessage": "front door opened",
        "cabinet": {
            "id": 1,
            "name": "C1",
            "frontLock": 5,
            "backLock": 6,
            "extra": "x",
        },
    }


@pytest.fixture
def udp_config():
    return SyslogConfig(host="127.0.0.1", port=5514)


@pytest.fixture
def tcp_config():
    return SyslogConfig(useTCP=True, host="127.0.0.1", port=5514)
