"""Command line entry points for Propsversion."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Callable, Optional

import typer

from . import __version__
from .normalizer import VersionResult, resolve_version
from .props import PropsWriter
from .reporting import ConsoleReporter, Reporter
from .settings import UpdateSettings
from .tags import GitTagSource, StaticTagSource, TagSource

app = typer.Typer(add_completion=False, help="Stamp Directory.Build.props with the release tag.")

# Replaced in tests to pin the copyright year.
_today: Callable[[], date] = date.today


@app.callback()
def _main() -> None:
    """Propsversion CLI."""


@app.command()
def version() -> None:
    """Print the installed Propsversion version."""

    typer.echo(__version__)


@app.command()
def show_config() -> None:
    """Print the current settings."""

    typer.echo(json.dumps(asdict(UpdateSettings()), indent=2, sort_keys=True))


@app.command()
def show(
    tag: Optional[str] = typer.Argument(
        None, help="Tag to parse. Defaults to the latest tag in the repository."
    ),
    repo_root: Optional[Path] = typer.Option(
        None, help="Repository to read tags from. Overrides PROPSVERSION_REPO_ROOT."
    ),
    no_git: bool = typer.Option(False, "--no-git", help="Never ask git for a tag."),
    numeric: bool = typer.Option(False, "--numeric", help="Also print MAJOR.MINOR.PATCH."),
) -> None:
    """Print the version that `update` would write."""

    settings = UpdateSettings()
    result = resolve_version(tag, _tag_source(settings, repo_root, no_git))
    if result.warning:
        typer.echo(f"Warning: {result.warning}", err=True)
    typer.echo(result.full_version)
    if numeric:
        typer.echo(result.numeric_version)


@app.command()
def update(
    tag: Optional[str] = typer.Argument(
        None, help="Explicit tag such as v1.11.0-rc1. Defaults to the latest repository tag."
    ),
    props: Optional[Path] = typer.Option(
        None, help="Props file to overwrite. Overrides PROPSVERSION_PROPS_PATH."
    ),
    repo_root: Optional[Path] = typer.Option(
        None, help="Repository to read tags from. Overrides PROPSVERSION_REPO_ROOT."
    ),
    year: Optional[int] = typer.Option(
        None, min=1, help="Copyright year. Defaults to the current calendar year."
    ),
    copyright_holder: Optional[str] = typer.Option(
        None, help="Name appended to the copyright line. Overrides PROPSVERSION_COPYRIGHT_HOLDER."
    ),
    no_git: bool = typer.Option(False, "--no-git", help="Never ask git for a tag."),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Print the rendered file instead of writing it."
    ),
) -> None:
    """Write the tag-derived version into the shared props file."""

    settings = UpdateSettings()
    if props is not None:
        settings.props_path = str(props)
    if copyright_holder is not None:
        settings.copyright_holder = copyright_holder

    run_update(
        tag,
        source=_tag_source(settings, repo_root, no_git),
        writer=PropsWriter(settings.props_path, settings.copyright_holder),
        reporter=ConsoleReporter(),
        copyright_year=year if year is not None else _today().year,
        dry_run=dry_run,
    )


def run_update(
    tag: Optional[str],
    *,
    source: TagSource,
    writer: PropsWriter,
    reporter: Reporter,
    copyright_year: int,
    dry_run: bool = False,
) -> VersionResult:
    """Resolve the version, write it, and report both steps."""

    result = resolve_version(tag, source)
    if result.warning:
        reporter.warning(result.warning)
    reporter.info(f"Using version {result.full_version} (numeric {result.numeric_version})")

    if dry_run:
        reporter.info(writer.render(result, copyright_year).rstrip("\n"))
        return result

    path = writer.write(result, copyright_year)
    reporter.info(f"Updated {path}")
    return result


def _tag_source(settings: UpdateSettings, repo_root: Optional[Path], no_git: bool) -> TagSource:
    if no_git:
        return StaticTagSource(None)
    root = repo_root if repo_root is not None else Path(settings.repo_root)
    return GitTagSource(root, git=settings.git_executable)

