"""Core types shared by every layer."""

from .config import Config, ConfigError, GitHubConfig, load_config, resolve_api_token
from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigError",
    "GitHubConfig",
    "load_config",
    "resolve_api_token",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
