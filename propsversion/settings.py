"""Runtime settings for Propsversion."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(slots=True)
class UpdateSettings:
    """Where the props file lives and how the version is looked up."""

    props_path: str = os.getenv("PROPSVERSION_PROPS_PATH", "Directory.Build.props")
    repo_root: str = os.getenv("PROPSVERSION_REPO_ROOT", ".")
    copyright_holder: str | None = _optional_env("PROPSVERSION_COPYRIGHT_HOLDER")
    git_executable: str = os.getenv("PROPSVERSION_GIT", "git")
