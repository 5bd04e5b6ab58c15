"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, NoReturn

import typer

from core.orchestrator import Orchestrator, RuntimeBundle
from core.system_inspector import inspect_system

logger = logging.getLogger("lw.cli")


def _configure_logging(config: dict[str, Any], log_level: str | None) -> None:
    logging_cfg = config.get("logging", {})
    level_name = str(log_level or logging_cfg.get("level", "WARNING")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, format=logging_cfg.get("format"))
    logging.getLogger("lw").setLevel(level)


def _runtime(root: Path | None = None, log_level: str | None = None) -> RuntimeBundle:
    try:
        bundle = Orchestrator(root=root).build()
        _configure_logging(bundle.config, log_level)
    except ValueError as exc:
        _fail(exc)
    return bundle


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)


def list_windows(root: Path | None = None, log_level: str | None = None) -> None:
    """Print a numbered list of window titles."""
    bundle = _runtime(root, log_level)
    try:
        windows = bundle.controller.list_windows()
    except RuntimeError as exc:
        logger.debug("Window listing failed", exc_info=True)
        _fail(exc)

    typer.echo(f"Found {len(windows)} windows:")
    for i, window in enumerate(windows, start=1):
        typer.echo(f"  {i}: {window}")


def list_records(root: Path | None = None, log_level: str | None = None) -> None:
    """Print window records as a JSON array."""
    bundle = _runtime(root, log_level)
    try:
        records = bundle.controller.list_window_records()
    except RuntimeError as exc:
        logger.debug("Window listing failed", exc_info=True)
        _fail(exc)
    typer.echo(json.dumps([record.model_dump() for record in records], indent=2, ensure_ascii=False))


def info(root: Path | None = None, log_level: str | None = None) -> None:
    """Show host diagnostics."""
    bundle = _runtime(root, log_level)
    typer.echo(json.dumps(inspect_system(bundle.controller), indent=2))


def config_show(root: Path | None = None, log_level: str | None = None) -> None:
    """Show effective runtime config."""
    bundle = _runtime(root, log_level)
    typer.echo(json.dumps(bundle.config, indent=2))
