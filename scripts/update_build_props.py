#!/usr/bin/env python3
"""Write the latest Git tag's version into Directory.Build.props.

Pass an explicit tag (``v1.11.0-rc1``) to skip the Git lookup. Accepts the same
options as ``propsversion update``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

ROOT = Path(__file__).resolve().parents[1]

sys.path.insert(0, str(ROOT))
from propsversion.cli import app  # noqa: E402


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        app(args=["update", *args], prog_name="update_build_props", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
