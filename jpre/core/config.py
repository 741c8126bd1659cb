"""Typed configuration loading and access.

The config file is optional. It lives at ``<user-config-dir>/config.toml``:

    cache_dir = "~/jdk-cache"

    [adoptium]
    vendor = "eclipse"
    jvm_impl = "hotspot"

    [http]
    timeout = 30.0

The cache root is resolved in this order: ``$JPRE_CACHE_DIR``, ``cache_dir``
from the config file, the platform user cache directory.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from jpre.platform.paths import user_cache_dir, user_config_dir

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "AdoptiumConfig",
    "Config",
    "ConfigError",
    "HttpConfig",
    "CACHE_DIR_ENV",
    "config_path",
    "load_config",
    "load_user_config",
]

CACHE_DIR_ENV = "JPRE_CACHE_DIR"

DEFAULT_VENDOR = "eclipse"
DEFAULT_JVM_IMPL = "hotspot"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class AdoptiumConfig:
    """Which Adoptium build flavour to download."""

    vendor: str = DEFAULT_VENDOR
    jvm_impl: str = DEFAULT_JVM_IMPL


@dataclass(frozen=True, slots=True)
class HttpConfig:
    timeout: float = DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    cache_dir: str | None = None
    adoptium: AdoptiumConfig = field(default_factory=AdoptiumConfig)
    http: HttpConfig = field(default_factory=HttpConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        adoptium: StrDict = get_table(data, "adoptium") or {}
        http: StrDict = get_table(data, "http") or {}

        timeout = get_float(http, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"http.timeout must be positive, got {timeout}")

        return cls(
            cache_dir=get_str(data, "cache_dir"),
            adoptium=AdoptiumConfig(
                vendor=get_str(adoptium, "vendor") or DEFAULT_VENDOR,
                jvm_impl=get_str(adoptium, "jvm_impl") or DEFAULT_JVM_IMPL,
            ),
            http=HttpConfig(timeout=timeout or DEFAULT_HTTP_TIMEOUT),
        )

    def cache_root(self) -> Path:
        """Resolve the process-wide cache root directory."""
        env = os.environ.get(CACHE_DIR_ENV)
        if env:
            return Path(env).expanduser()
        if self.cache_dir:
            return Path(self.cache_dir).expanduser()
        return user_cache_dir()

    def jdks_dir(self) -> Path:
        """Directory holding one sub-directory per installed JDK major."""
        return self.cache_root() / "jdks"


def config_path() -> Path:
    return user_config_dir() / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax in {path}: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config {path}: {e}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config {path}: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure in {path}: {e}", path=path))


def load_user_config() -> Result[Config, ConfigError]:
    """Load the user config file, or defaults when there is none."""
    path = config_path()
    if not path.exists():
        return Ok(Config())
    return load_config(path)
