# -*- coding: utf-8 -*-

# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2025 Ziggiz Inc.
#
# This file is part of the ziggiz-courier-core-data-processing and is licensed under the
# Business Source License 1.1. You may not use this file except in
# compliance with the License. You may obtain a copy of the License at:
# https://github.com/ziggiz-courier/ziggiz-courier-core-data-processing/blob/main/LICENSE
# Configuration module for the syslog emitter: transport settings, the persisted
# config store and logging setup

# Standard library imports
import json
import logging
import os

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

# Third-party imports
import yaml

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Local/package imports
from tanlock_syslog.errors import ConfigLoadError
from tanlock_syslog.protocol.framing import parse_end_of_msg_marker
from tanlock_syslog.protocol.framing_common import TransportKind

DEFAULT_CONFIG_FILENAME = "syslogConfig.json"
CONFIG_PATH_ENV_VAR = "TANLOCK_SYSLOG_CONFIG"

# Documentation example of the default configuration, returned verbatim by get_help()
CONFIG_HELP = (
    "{\n"
    '    "useTCP": false,\n'
    '    "tcpTLS": false,\n'
    '    "tcpOC": true,\n'
    '    "tcpNonTransparentFramingChar": "\\n",\n'
    '    "port": 514,\n'
    '    "host": "255.255.255.255",\n'
    '    "syslogHostname": "-"\n'
    "}"
)

logger = logging.getLogger("tanlock_syslog.config")


class SyslogConfig(BaseModel):
    """
    Transport configuration for the syslog emitter.

    Field names follow Python conventions; the persisted JSON uses the camelCase
    aliases (useTCP, tcpTLS, ...). Both spellings are accepted on input.
    The configuration is immutable once loaded.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    use_tcp: bool = Field(default=False, alias="useTCP")
    tcp_tls: bool = Field(default=False, alias="tcpTLS")  # implies TCP framing
    tcp_oc: bool = Field(default=True, alias="tcpOC")  # octet counting on plain TCP
    tcp_non_transparent_framing_char: str = Field(
        default="\n", alias="tcpNonTransparentFramingChar"
    )
    port: int = 514
    host: str = "255.255.255.255"
    syslog_hostname: Optional[str] = Field(default="-", alias="syslogHostname")

    # Escape '"', '\' and ']' in structured data values (RFC 5424 6.3.3).
    # Off by default to keep the wire format collectors already parse.
    sd_escape: bool = Field(default=False, alias="sdEscape")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate that the port is a valid TCP/UDP port."""
        if not 0 < v < 65536:
            raise ValueError(f"Invalid port: {v}. Must be between 1 and 65535")
        return v

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Validate that a destination host is given."""
        v = v.strip()
        if not v:
            raise ValueError("Host must not be empty")
        return v

    @field_validator("tcp_non_transparent_framing_char")
    @classmethod
    def validate_framing_char(cls, v: str) -> str:
        """Resolve escape notation such as "\\n" into the real marker."""
        return parse_end_of_msg_marker(v)

    @property
    def transport_kind(self) -> TransportKind:
        return TransportKind.from_flags(self.use_tcp, self.tcp_tls)


class ConfigStore:
    """
    Reads and writes the persisted syslog configuration file.

    A missing or malformed file is never an error for the caller: the default
    configuration is used instead and the problem is logged.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Initialize the config store.

        Args:
            path: Path of the configuration file. Defaults to the file named by
                TANLOCK_SYSLOG_CONFIG, or syslogConfig.json in the working directory.
        """
        if path is None:
            path = os.environ.get(CONFIG_PATH_ENV_VAR) or Path.cwd() / DEFAULT_CONFIG_FILENAME
        self.path = Path(path)
        self.config: SyslogConfig = SyslogConfig()

    def _read(self) -> SyslogConfig:
        """
        Read and validate the configuration file.

        Raises:
            ConfigLoadError: If the file is missing, unreadable or invalid.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                # JSON documents are valid YAML
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigLoadError(f"Configuration file not found: {self.path}") from e
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Error reading configuration file: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoadError(f"Configuration file is not a mapping: {self.path}")
        try:
            return SyslogConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid configuration: {e}") from e

    def _read_or_default(self) -> SyslogConfig:
        try:
            config = self._read()
        except ConfigLoadError as e:
            logger.warning(
                "Using default syslog configuration",
                extra={"path": str(self.path), "error": str(e)},
            )
            return SyslogConfig()
        logger.debug("Loaded syslog configuration", extra={"path": str(self.path)})
        return config

    def load(self) -> SyslogConfig:
        """
        Load the persisted configuration, falling back to the defaults.

        Returns:
            The loaded (or default) configuration, also kept as ``self.config``
        """
        self.config = self._read_or_default()
        return self.config

    async def get_config(self) -> SyslogConfig:
        """
        Return the persisted configuration or the default one.

        The file is only read; the in-memory configuration is left as it is.
        """
        return self._read_or_default()

    def write(self, config: Union[SyslogConfig, Mapping[str, Any]]) -> None:
        """
        Replace the in-memory configuration and persist it as JSON.

        Errors are logged and never raised.

        Args:
            config: The new configuration
        """
        if not isinstance(config, SyslogConfig):
            try:
                config = SyslogConfig.model_validate(config)
            except ValidationError as e:
                logger.error("Rejected invalid syslog configuration", extra={"error": str(e)})
                return

        self.config = config
        try:
            self.path.write_text(
                json.dumps(config.model_dump(by_alias=True), indent=4), encoding="utf-8"
            )
        except OSError as e:
            logger.error(
                "Failed to store syslog configuration",
                extra={"path": str(self.path), "error": str(e)},
            )

    @staticmethod
    def get_help() -> str:
        return CONFIG_HELP


class LoggerConfig(BaseModel):
    """
    Configuration for individual loggers.

    Attributes:
        name (str): Logger name.
        level (str): Logging level (default: "INFO").
        propagate (bool): Whether to propagate logs to parent (default: True).
    """

    name: str
    level: str = "INFO"
    propagate: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration for the emitter process."""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    loggers: List[LoggerConfig] = Field(default_factory=list)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that the log level is a valid Python logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v


def load_logging_config(config_path: Optional[Union[str, Path]] = None) -> LoggingConfig:
    """
    Load logging configuration from a YAML file.

    Args:
        config_path: Path to the YAML file. If None, the defaults are returned.

    Returns:
        A LoggingConfig object.

    Raises:
        FileNotFoundError: If the configuration file cannot be found.
        yaml.YAMLError: If the configuration file contains invalid YAML.
    """
    if not config_path:
        return LoggingConfig()

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Logging configuration file not found: {config_file}")

    with open(config_file, "r") as f:
        try:
            config_data = yaml.safe_load(f) or {}
            return LoggingConfig(**config_data)
        except yaml.YAMLError as e:
            logging.error("Error parsing logging configuration file", extra={"error": e})
            raise


class SafeExtraFormatter(logging.Formatter):
    """
    Custom formatter that substitutes missing extra fields with a blank string.
    """

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "error"):
            record.error = ""
        return super().format(record)


def configure_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on the provided configuration.

    Args:
        config: The logging configuration.
    """
    # Reset logging configuration
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level = getattr(logging, config.log_level, logging.INFO)
    formatter = SafeExtraFormatter(config.log_format, datefmt=config.log_date_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logging.root.setLevel(level)
    logging.root.addHandler(console_handler)

    for logger_config in config.loggers:
        named_logger = logging.getLogger(logger_config.name)
        named_logger.setLevel(getattr(logging, logger_config.level, logging.INFO))
        named_logger.propagate = logger_config.propagate
