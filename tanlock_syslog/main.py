# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Command line entry point: send a single event through the configured transport

# Standard library imports
import argparse
import asyncio
import logging
import sys
import time

from typing import Any, Dict, List, Optional

# Local/package imports
from tanlock_syslog.config import (
    ConfigStore,
    LoggingConfig,
    configure_logging,
    load_logging_config,
)
from tanlock_syslog.emitter import SyslogEmitter
from tanlock_syslog.telemetry import setup_tracing


def setup_logging(log_level: str = "INFO", config: Optional[LoggingConfig] = None) -> None:
    """
    Configure logging with appropriate formatters and handlers.

    Args:
        log_level: The logging level to set (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        config: Optional logging configuration, overrides ``log_level``
    """
    configure_logging(config or LoggingConfig(log_level=log_level))


async def emit_event(
    config_path: Optional[str], msg_type: str, body: Dict[str, Any]
) -> bool:
    """
    Initialize an emitter, send one event and close the transport.

    Args:
        config_path: Path of the syslog configuration file
        msg_type: The event type
        body: The event payload

    Returns:
        True if the transport was opened and the event handed to it
    """
    emitter = SyslogEmitter(ConfigStore(config_path))
    await emitter.init()
    try:
        emitter.on_event(msg_type, body)
        return emitter.initialized
    finally:
        await emitter.close()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TANlock syslog emitter")
    parser.add_argument(
        "--config",
        type=str,
        help="Path to the syslog configuration file (JSON)",
    )
    parser.add_argument(
        "--logging-config",
        type=str,
        help="Path to a YAML logging configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (overrides logging config file)",
    )
    parser.add_argument(
        "--show-config-help",
        action="store_true",
        help="Print an example configuration and exit",
    )
    parser.add_argument("--type", type=str, default="test", help="Event type (MSGID)")
    parser.add_argument("--event", type=str, default="test", help="Event name")
    parser.add_argument("--event-id", type=str, default="0", help="Event identifier")
    parser.add_argument("--message", type=str, help="Free text message")
    parser.add_argument(
        "--timestamp",
        type=str,
        help="ISO-8601 timestamp (default: now)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the syslog emitter CLI.
    Parses command-line arguments, sets up logging, and sends one event.
    """
    args = build_parser().parse_args(argv)

    if args.show_config_help:
        print(SyslogEmitter.get_help())
        return

    try:
        logging_config = load_logging_config(args.logging_config)
        if args.log_level:
            logging_config = logging_config.model_copy(
                update={"log_level": args.log_level}
            )
        setup_logging(config=logging_config)
        setup_tracing()
        logger = logging.getLogger("tanlock_syslog.main")

        body: Dict[str, Any] = {
            "event": args.event,
            "eventId": args.event_id,
            "eventMessage": args.message,
            "timestamp": args.timestamp or int(time.time() * 1000),
        }
        sent = asyncio.run(emit_event(args.config, args.type, body))
        if not sent:
            logger.error("Event was not sent, syslog transport unavailable")
            sys.exit(1)
        logger.info("Event sent")
    except KeyboardInterrupt:
        logger = logging.getLogger("tanlock_syslog.main")
        logger.info("Interrupted by user")
    except Exception as e:
        if not logging.root.handlers:
            setup_logging("ERROR")
        logger = logging.getLogger("tanlock_syslog.main")
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
