"""CLI entrypoint for mosn-config — typer app with `check` and `dump` commands."""

import sys
from pathlib import Path

import structlog
import typer

from mosn_config.config.application.holder import ConfigHolder
from mosn_config.config.domain.config import MosnConfig
from mosn_config.config.infrastructure.json_loader import JsonConfigLoader
from mosn_config.config.infrastructure.observer import StructlogConfigObserver
from mosn_config.core.errors import MosnConfigError

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        # stdout is reserved for command output such as `dump`
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def load_or_exit(holder: ConfigHolder, path: Path) -> MosnConfig:
    """Load config into holder, or stop the process with exit code 1.

    The loader's observer has already logged the path and cause by the time
    the error reaches here.
    """
    try:
        return holder.load(path=path)
    except MosnConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


def _new_holder() -> ConfigHolder:
    return ConfigHolder(loader=JsonConfigLoader(observer=StructlogConfigObserver()))


@app.command()
def check(
    config_path: Path = typer.Argument(..., help="Path to the MOSN config JSON"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Load and validate a config file, then print a short summary."""
    _configure_structlog(log_format=log_format)
    holder = _new_holder()
    cfg = load_or_exit(holder=holder, path=config_path)

    listeners = sum(len(server.listeners) for server in cfg.servers)
    typer.echo(
        f"OK {holder.path}: {len(cfg.servers)} server(s), {listeners} listener(s),"
        f" {len(cfg.cluster_manager.clusters)} cluster(s)"
    )


@app.command()
def dump(
    config_path: Path = typer.Argument(..., help="Path to the MOSN config JSON"),
    indent: int = typer.Option(2, "--indent", min=0, help="Indent width"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Load a config file and print it re-serialised."""
    _configure_structlog(log_format=log_format)
    holder = _new_holder()
    load_or_exit(holder=holder, path=config_path)
    typer.echo(holder.dump(indent=indent))


if __name__ == "__main__":
    app()
