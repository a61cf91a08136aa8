"""Configuration loading and duration parsing for the coiner runner."""

from __future__ import annotations

from .config import AppConfig, ConfigDeserializeError, ConfigError, ConfigReadError, NodeEndpoint, load_config, load_config_or_exit  # noqa: F401
from .duration import DurationParseError, Interval, parse_duration  # noqa: F401
