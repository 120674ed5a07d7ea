"""Sources for the most recent release tag."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Protocol, Union

LOGGER = logging.getLogger("propsversion.tags")


class TagSource(Protocol):
    def fetch_latest_tag(self) -> Optional[str]:
        """Return the latest tag, or ``None``/empty when there is none."""


class GitTagSource:
    """Read the most recent tag reachable from HEAD with ``git describe``."""

    def __init__(self, repo_root: Union[str, Path] = ".", git: str = "git") -> None:
        self.repo_root = Path(repo_root)
        self.git = git

    def fetch_latest_tag(self) -> Optional[str]:
        try:
            completed = subprocess.run(
                [self.git, "describe", "--tags", "--abbrev=0"],
                cwd=str(self.repo_root),
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            LOGGER.debug("git describe failed in %s: %s", self.repo_root, exc)
            return None
        return completed.stdout.strip() or None


class StaticTagSource:
    """Tag source that always answers with the same value."""

    def __init__(self, tag: Optional[str] = None) -> None:
        self.tag = tag
        self.calls = 0

    def fetch_latest_tag(self) -> Optional[str]:
        self.calls += 1
        return self.tag
