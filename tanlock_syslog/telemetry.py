# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# OpenTelemetry setup for the TANlock syslog emitter
#
# Library code traces through the global provider, so spans go wherever the host
# application configured OpenTelemetry. The CLI installs its own provider with
# setup_tracing(); spans are only exported to the console when
# TANLOCK_SYSLOG_TRACE_CONSOLE is set.

# Standard library imports
import os

from typing import Optional

# Third-party imports
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Tracer

SERVICE_NAME = "tanlock-syslog"
TRACE_CONSOLE_ENV_VAR = "TANLOCK_SYSLOG_TRACE_CONSOLE"

_tracer_provider: Optional[TracerProvider] = None


def setup_tracing(console: Optional[bool] = None) -> TracerProvider:
    """
    Install the tracer provider for the CLI, once per process.

    Not called by library code: an application embedding the emitter keeps its
    own provider.

    Args:
        console: Export spans to stdout. Read from TANLOCK_SYSLOG_TRACE_CONSOLE
            when None. Ignored once the provider exists.

    Returns:
        The tracer provider
    """
    global _tracer_provider
    if _tracer_provider is not None:
        return _tracer_provider

    if console is None:
        console = os.environ.get(TRACE_CONSOLE_ENV_VAR, "").lower() in ("1", "true", "yes")

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    if console:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    return provider


def get_tracer() -> Tracer:
    return trace.get_tracer(SERVICE_NAME)
