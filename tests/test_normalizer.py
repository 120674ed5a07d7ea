from __future__ import annotations

import pytest
from pydantic import ValidationError

from propsversion.normalizer import DEFAULT_VERSION, VersionResult, normalize, resolve_version
from propsversion.tags import StaticTagSource


@pytest.mark.parametrize(
    ("tag", "full", "numeric"),
    [
        ("v1.11.0", "1.11.0", "1.11.0"),
        ("v1.11.0-rc1", "1.11.0-rc1", "1.11.0"),
        ("1.11.0-beta.2", "1.11.0-beta.2", "1.11.0"),
        ("v10.200.3000+build.7", "10.200.3000+build.7", "10.200.3000"),
        ("v2.0.1\n", "2.0.1", "2.0.1"),
    ],
)
def test_normalize_extracts_numeric_prefix(tag: str, full: str, numeric: str) -> None:
    result = normalize(tag)

    assert result.full_version == full
    assert result.numeric_version == numeric
    assert result.warning is None
    assert not result.is_default


@pytest.mark.parametrize("tag", [None, "", "   "])
def test_normalize_without_tag_uses_default(tag: str | None) -> None:
    result = normalize(tag)

    assert result.full_version == DEFAULT_VERSION
    assert result.numeric_version == DEFAULT_VERSION
    assert result.is_default
    assert "none found" in result.warning


def test_normalize_garbage_falls_back_with_warning() -> None:
    result = normalize("garbage")

    assert (result.full_version, result.numeric_version) == ("1.10.0", "1.10.0")
    assert result.warning == "could not parse version from 'garbage'"


def test_normalize_strips_only_one_leading_v() -> None:
    result = normalize("vv1.0.0")

    assert result.is_default
    assert result.warning == "could not parse version from 'v1.0.0'"


@pytest.mark.parametrize("tag", ["v1.2", "release-1.2.3", "v１.２.３", "١.٢.٣"])
def test_normalize_requires_ascii_three_component_prefix(tag: str) -> None:
    result = normalize(tag)

    assert result.is_default
    assert result.numeric_version == DEFAULT_VERSION
    assert result.warning is not None


def test_normalize_is_idempotent() -> None:
    assert normalize("v1.11.0-rc1") == normalize("v1.11.0-rc1")
    assert normalize("nope") == normalize("nope")


def test_assembly_version_appends_revision() -> None:
    assert normalize("v3.4.5-alpha").assembly_version == "3.4.5.0"


def test_version_result_rejects_mismatched_prefix() -> None:
    with pytest.raises(ValidationError):
        VersionResult(full_version="2.0.0", numeric_version="1.0.0")


def test_version_result_rejects_non_numeric_version() -> None:
    with pytest.raises(ValidationError):
        VersionResult(full_version="1.0.0-rc1", numeric_version="1.0.0-rc1")


def test_resolve_version_prefers_explicit_tag() -> None:
    source = StaticTagSource("v9.9.9")

    result = resolve_version("v1.11.0", source)

    assert result.full_version == "1.11.0"
    assert source.calls == 0


def test_resolve_version_falls_back_to_tag_source() -> None:
    source = StaticTagSource("v1.12.3-rc2")

    result = resolve_version("", source)

    assert result.full_version == "1.12.3-rc2"
    assert result.numeric_version == "1.12.3"
    assert source.calls == 1


def test_resolve_version_without_any_tag_uses_default() -> None:
    result = resolve_version(None, StaticTagSource(None))

    assert result.full_version == DEFAULT_VERSION
    assert result.is_default


def test_version_result_rejects_non_ascii_digits() -> None:
    with pytest.raises(ValidationError):
        VersionResult(full_version="１.２.３", numeric_version="１.２.３")
