"""Status and warning output for version updates."""

from __future__ import annotations

import logging
from typing import List, Protocol

import typer

LOGGER = logging.getLogger("propsversion")


class Reporter(Protocol):
    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


class ConsoleReporter:
    """Echo status lines to stdout and warnings to stderr."""

    def info(self, message: str) -> None:
        LOGGER.debug(message)
        typer.echo(message)

    def warning(self, message: str) -> None:
        LOGGER.debug("warning: %s", message)
        typer.echo(f"Warning: {message}", err=True)


class RecordingReporter:
    def __init__(self) -> None:
        self.infos: List[str] = []
        self.warnings: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)
