from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from rich.console import Console

from .duration import Interval

logger = logging.getLogger("coiner.config")


class ConfigError(RuntimeError):
    """Base class for configuration load failures."""


class ConfigReadError(ConfigError):
    """The configuration file could not be read."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read config {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigDeserializeError(ConfigError):
    """The configuration document does not match the schema."""

    def __init__(self, path: Path, errors: List[Tuple[str, str]]) -> None:
        details = "; ".join(f"{field}: {message}" if field else message for field, message in errors)
        super().__init__(f"Invalid config {path}: {details}")
        self.path = path
        self.errors = errors

    @property
    def fields(self) -> List[str]:
        return [field for field, _ in self.errors if field]


class NodeEndpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    protocol: str
    host: str
    user: str
    password: str = Field(repr=False)


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    request_timeout: Interval
    slow_threshold: Interval
    max_threads: int = Field(ge=0, le=65535, strict=True)
    node: NodeEndpoint


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ConfigReadError(path, exc.strerror or str(exc)) from exc


def _parse_document(path: Path, text: str) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = tomllib.loads(text)
        elif suffix == ".json":
            data = json.loads(text)
        elif suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(text) or {}
        else:
            raise ConfigDeserializeError(path, [("", f"Unsupported config extension: {suffix or '<none>'}")])
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigDeserializeError(path, [("", f"Syntax error: {exc}")]) from exc
    if not isinstance(data, dict):
        raise ConfigDeserializeError(path, [("", "Config root must be a mapping")])
    return data


def _validation_errors(exc: ValidationError) -> List[Tuple[str, str]]:
    return [(".".join(str(part) for part in err["loc"]), err["msg"]) for err in exc.errors()]


def load_config(path: Path | str) -> AppConfig:
    """Read and validate the config document at ``path``.

    Raises :class:`ConfigReadError` when the file cannot be read and
    :class:`ConfigDeserializeError` when its contents do not fit
    :class:`AppConfig`.
    """

    config_path = Path(path)
    text = _read_text(config_path)
    data = _parse_document(config_path, text)
    try:
        config = AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigDeserializeError(config_path, _validation_errors(exc)) from exc
    logger.debug("Loaded config %s from %s", config.name, config_path)
    return config


def load_config_or_exit(path: Path | str) -> AppConfig:
    """Startup gate: return the config or report to stderr and exit with status 1."""

    try:
        return load_config(path)
    except ConfigError as exc:
        Console(stderr=True).print(f"Error loading config: {exc}", markup=False, highlight=False, soft_wrap=True)
        raise SystemExit(1) from exc
