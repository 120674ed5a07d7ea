"""Propsversion stamps MSBuild shared props files with tag-derived versions."""

from importlib import metadata as _metadata

__version__ = "0.1.0"

try:
    __version__ = _metadata.version("propsversion")
except _metadata.PackageNotFoundError:
    pass


from .normalizer import DEFAULT_VERSION, VersionResult, normalize, resolve_version
from .props import PropsWriter, render_props, write_props
from .tags import GitTagSource, StaticTagSource, TagSource

__all__ = [
    "DEFAULT_VERSION",
    "VersionResult",
    "normalize",
    "resolve_version",
    "PropsWriter",
    "render_props",
    "write_props",
    "GitTagSource",
    "StaticTagSource",
    "TagSource",
]
