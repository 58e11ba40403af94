"""CLI entry point for blogmd."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from blogmd.config import BlogmdConfig, load_config
from blogmd.config.loader import DEFAULT_CONFIG_TEMPLATE
from blogmd.errors import FatalIOError, ParseError
from blogmd.models import BatchReport
from blogmd.pipeline import run

app = typer.Typer(
    name="blogmd",
    help="Convert a blog RSS export into Markdown posts with front matter.",
)

config_app = typer.Typer(help="Manage blogmd configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: BlogmdConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _get_config() -> BlogmdConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to blogmd.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=_LOG_LEVELS[_config.log_level],
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _display_report(report: BatchReport, dry_run: bool) -> None:
    verb = "Would write" if dry_run else "Written"
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("File", style="green")
    table.add_column("Status", justify="center")
    for o in report.outcomes:
        status = "[green]OK[/green]" if o.ok else f"[red]{escape(o.error or '')}[/red]"
        table.add_row(str(o.index), escape(o.title) or "-", escape(o.path or "-"), status)
    rprint(table)
    rprint(f"[bold]{verb}:[/bold] {report.written}  [bold]Failed:[/bold] {report.failed}")


@app.command()
def convert(
    feed: Annotated[
        str | None, typer.Argument(help="RSS export to convert (default: feed.path)")
    ] = None,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Override output directory")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Preview without writing")
    ] = False,
) -> None:
    """Convert every post in the feed to a Markdown file."""
    cfg = _get_config()
    feed_path = feed or cfg.feed.path
    output_dir = output or cfg.output.base_dir
    dry_run = dry_run or cfg.output.dry_run

    try:
        report = run(
            feed_path,
            output_dir,
            extension=cfg.output.extension,
            dry_run=dry_run,
        )
    except (FatalIOError, ParseError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if not report.outcomes:
        rprint(f"[yellow]No items found in {escape(feed_path)}.[/yellow]")
        raise typer.Exit(0)

    _display_report(report, dry_run)
    if report.failed:
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite existing config")
    ] = False,
) -> None:
    """Create default blogmd.yaml in current directory."""
    target = Path("blogmd.yaml")
    if target.exists() and not force:
        rprint("[yellow]blogmd.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
