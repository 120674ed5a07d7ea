"""Render and write the shared ``Directory.Build.props`` file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union
from xml.sax.saxutils import escape

from .normalizer import VersionResult

LOGGER = logging.getLogger("propsversion.props")

PROPS_TEMPLATE = """\
<Project>
  <PropertyGroup>
    <VersionPrefix>{prefix}</VersionPrefix>
    <AssemblyVersion>{assembly}</AssemblyVersion>
    <FileVersion>{assembly}</FileVersion>
    <InformationalVersion>{informational}</InformationalVersion>
    <Copyright>{copyright}</Copyright>
  </PropertyGroup>
</Project>
"""


def copyright_line(year: int, holder: Optional[str] = None) -> str:
    text = f"Copyright © {year}"
    if holder and holder.strip():
        text = f"{text} {holder.strip()}"
    return text


def render_props(
    result: VersionResult, copyright_year: int, copyright_holder: Optional[str] = None
) -> str:
    """Return the props file text for ``result``.

    ``AssemblyVersion`` and ``FileVersion`` carry the numeric version with a
    fourth ``.0`` component; the pre-release suffix only reaches
    ``InformationalVersion``.
    """

    return PROPS_TEMPLATE.format(
        prefix=escape(result.numeric_version),
        assembly=escape(result.assembly_version),
        informational=escape(result.full_version),
        copyright=escape(copyright_line(copyright_year, copyright_holder)),
    )


def write_props(
    path: Union[str, Path],
    result: VersionResult,
    copyright_year: int,
    copyright_holder: Optional[str] = None,
) -> Path:
    """Overwrite ``path`` with the rendered props file and return it."""

    target = Path(path).expanduser()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_props(result, copyright_year, copyright_holder), encoding="utf-8")
    LOGGER.info("Wrote %s for version %s", target, result.full_version)
    return target


class PropsWriter:
    """Writes a props file to a fixed location."""

    def __init__(self, path: Union[str, Path], copyright_holder: Optional[str] = None) -> None:
        self.path = Path(path)
        self.copyright_holder = copyright_holder

    def write(self, result: VersionResult, copyright_year: int) -> Path:
        return write_props(self.path, result, copyright_year, self.copyright_holder)

    def render(self, result: VersionResult, copyright_year: int) -> str:
        return render_props(result, copyright_year, self.copyright_holder)
