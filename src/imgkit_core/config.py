"""Configuration loading utilities for imgkit-core."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .logging import get_logger
from .models import PathPlatform, TextEncoding
from .paths import default_config_path

INT32_MAX = 2**31 - 1

logger = get_logger("config")


class _Section(BaseModel):
    # installed configs are shared by every helper; replace them, never mutate them
    model_config = ConfigDict(frozen=True)


class LoggingConfig(_Section):
    level: str = Field(default="INFO", description="Logging verbosity level")
    format: Literal["json", "console"] = Field(default="json", description="json lines or human-readable console output")

    def normalized_level(self) -> str:
        return self.level.upper()


class FingerprintConfig(_Section):
    encoding: TextEncoding = Field(
        default=TextEncoding.LEGACY,
        description="legacy keeps UTF-16 for MD5 and ASCII for SHA; utf-8 uses UTF-8 everywhere",
    )


class NumbersConfig(_Section):
    max_value: int = Field(default=INT32_MAX, ge=0, description="Largest integer a digit run may parse to")


class PathsConfig(_Section):
    platform: PathPlatform = Field(default=PathPlatform.AUTO, description="File-name rules: auto|windows|posix")
    invalid_chars: Optional[str] = Field(
        default=None,
        description="Explicit illegal file-name characters; overrides platform when set",
    )


class AppConfig(_Section):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    fingerprint: FingerprintConfig = Field(default_factory=FingerprintConfig)
    numbers: NumbersConfig = Field(default_factory=NumbersConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)


DEFAULT_CONFIG = AppConfig()

_active: AppConfig = DEFAULT_CONFIG


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".imgkit" / "config.yaml"
    yield default_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                config = AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
            logger.debug("config.loaded", path=str(candidate))
            return config
    return DEFAULT_CONFIG


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


def get_config() -> AppConfig:
    """Return the configuration the helpers consult when no override is passed."""
    return _active


def set_config(config: AppConfig | None) -> AppConfig:
    """Install ``config`` as the active configuration; ``None`` restores the defaults.

    Returns the previously active configuration so callers can restore it.
    """
    global _active
    previous = _active
    _active = config if config is not None else DEFAULT_CONFIG
    logger.debug(
        "config.installed",
        encoding=_active.fingerprint.encoding.value,
        max_value=_active.numbers.max_value,
        platform=_active.paths.platform.value,
        invalid_chars_override=_active.paths.invalid_chars is not None,
    )
    return previous


__all__ = [
    "AppConfig",
    "FingerprintConfig",
    "LoggingConfig",
    "NumbersConfig",
    "PathsConfig",
    "DEFAULT_CONFIG",
    "INT32_MAX",
    "config_search_paths",
    "load_config",
    "dump_default_config",
    "get_config",
    "set_config",
]
