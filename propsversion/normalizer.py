"""Turn tag-like strings into validated version numbers for the props file."""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .tags import TagSource

LOGGER = logging.getLogger("propsversion.normalizer")

DEFAULT_VERSION = "1.10.0"
NUMERIC_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+")


class VersionResult(BaseModel):
    """Version fields derived from a single tag."""

    model_config = ConfigDict(frozen=True)

    full_version: str = Field(
        ..., description="Version including any pre-release suffix, without the leading 'v'."
    )
    numeric_version: str = Field(
        ..., pattern=r"^[0-9]+\.[0-9]+\.[0-9]+$", description="MAJOR.MINOR.PATCH only."
    )
    warning: str | None = Field(
        None, description="Set when the default version was used in place of the tag."
    )

    @model_validator(mode="after")
    def _check_prefix(self) -> "VersionResult":
        if not self.full_version.startswith(self.numeric_version):
            raise ValueError(
                f"full version {self.full_version!r} does not start with "
                f"numeric version {self.numeric_version!r}"
            )
        return self

    @property
    def assembly_version(self) -> str:
        return f"{self.numeric_version}.0"

    @property
    def is_default(self) -> bool:
        return self.warning is not None

    @classmethod
    def default(cls, warning: str) -> "VersionResult":
        return cls(full_version=DEFAULT_VERSION, numeric_version=DEFAULT_VERSION, warning=warning)


def normalize(raw_tag: str | None) -> VersionResult:
    """Return the version encoded in ``raw_tag``.

    A single leading ``v`` is stripped and the ``MAJOR.MINOR.PATCH`` prefix is
    extracted. Anything after the prefix is kept in ``full_version`` only. An
    absent or unparseable tag yields the default version with a warning set;
    this function never raises.
    """

    tag = (raw_tag or "").strip()
    if not tag:
        return VersionResult.default(
            f"no version tag supplied and none found in the repository; using {DEFAULT_VERSION}"
        )

    candidate = tag[1:] if tag.startswith("v") else tag
    match = NUMERIC_PATTERN.match(candidate)
    if match is None:
        LOGGER.debug("Tag %r has no numeric version prefix", tag)
        return VersionResult.default(f"could not parse version from '{candidate}'")

    return VersionResult(full_version=candidate, numeric_version=match.group(0))


def resolve_version(explicit: str | None, source: TagSource) -> VersionResult:
    """Normalize ``explicit``, or the latest tag from ``source`` when it is empty."""

    if explicit and explicit.strip():
        return normalize(explicit)
    tag = source.fetch_latest_tag()
    LOGGER.debug("Tag source returned %r", tag)
    return normalize(tag)
