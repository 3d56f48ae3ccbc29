from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from relkit.core.config import (
    DEFAULT_CONFIG_FILENAME,
    Config,
    load_config,
    resolve_api_token,
)
from relkit.core.errors import ErrorCode
from relkit.core.result import Err
from relkit.github.api.create_milestone import CreateMilestoneThroughApiCall
from relkit.http.client import HttpClient, UrllibHttpClient
from relkit.http.message import DefaultRequestFactory
from relkit.output.console import ConsoleProtocol, RichConsole
from relkit.output.log import StdLogger, configure_logging


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    create_milestone: CreateMilestoneThroughApiCall


def exit_with(err: str, *, code: ErrorCode) -> NoReturn:
    typer.echo(f"error: {err}", err=True)
    raise typer.Exit(code=int(code))


def _load(config_path: Path | None) -> Config:
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not default.is_file():
            return Config()
        config_path = default

    result = load_config(config_path)
    if isinstance(result, Err):
        exit_with(result.error.message, code=ErrorCode.ENV_ERROR)
    return result.value


def build_context(
    *,
    config_path: Path | None,
    verbose: bool,
    http_client: HttpClient | None = None,
    environ: Mapping[str, str] | None = None,
) -> CLIContext:
    configure_logging(verbose=verbose)
    config = _load(config_path)

    token = resolve_api_token(config, os.environ if environ is None else environ)
    if isinstance(token, Err):
        exit_with(token.error.message, code=ErrorCode.ENV_ERROR)

    client = http_client or UrllibHttpClient(timeout=config.github.timeout)
    return CLIContext(
        config=config,
        console=RichConsole(),
        create_milestone=CreateMilestoneThroughApiCall(
            DefaultRequestFactory(),
            client,
            token.value,
            StdLogger("relkit.github"),
        ),
    )
