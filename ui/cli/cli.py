"""CLI entrypoint for list-windows."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="List the windows currently open on this desktop")
config_app = typer.Typer(help="Configuration commands")


@app.callback()
def main_callback(
    ctx: typer.Context,
    root: Path | None = typer.Option(None, "--root", help="Directory containing config/default.yaml"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG"),
) -> None:
    """Window enumeration tools."""
    ctx.obj = {"root": root, "log_level": log_level}


@app.command("list")
def list_cmd(ctx: typer.Context) -> None:
    """Print the title of every open window."""
    commands.list_windows(**ctx.obj)


@app.command("records")
def records_cmd(ctx: typer.Context) -> None:
    """Print every open window as a JSON record."""
    commands.list_records(**ctx.obj)


@app.command("info")
def info_cmd(ctx: typer.Context) -> None:
    """Show host and backend diagnostics."""
    commands.info(**ctx.obj)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(**ctx.obj)


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
