"""Typed configuration loading and access.

Configuration is optional: every field has a default, and a missing file
yields ``Config()``. The API host and User-Agent are deliberately absent;
they are part of the wire contract, not settings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_float, get_str, get_table

__all__ = [
    "Config",
    "ConfigError",
    "GitHubConfig",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_TOKEN_ENV",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_config",
    "resolve_api_token",
]

DEFAULT_CONFIG_FILENAME = "relkit.toml"
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or a setting cannot be resolved."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class GitHubConfig:
    """GitHub API settings.

    Attributes:
        token_env: Name of the environment variable holding the API token
        timeout: Transport timeout in seconds for each API call
    """

    token_env: str = DEFAULT_TOKEN_ENV
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        github: StrDict = get_table(data, "github") or {}

        timeout = get_float(github, "timeout")
        if timeout is not None and timeout <= 0:
            raise ValueError(f"github.timeout must be positive, got {timeout}")

        return cls(
            github=GitHubConfig(
                token_env=get_str(github, "token_env") or DEFAULT_TOKEN_ENV,
                timeout=timeout if timeout is not None else DEFAULT_TIMEOUT_SECONDS,
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to relkit.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def resolve_api_token(config: Config, environ: Mapping[str, str]) -> Result[str, ConfigError]:
    """Read the API token from the environment variable named in config.

    The token is treated as opaque; only emptiness is checked.
    """
    name = config.github.token_env
    token = environ.get(name, "").strip()
    if not token:
        return Err(ConfigError(f"missing API token: set {name}"))
    return Ok(token)
