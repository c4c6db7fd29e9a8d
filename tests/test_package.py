"""Tests for the package-level exports."""

import buildmeta
from buildmeta.version import PACKAGE_VERSION


def test_version_exported() -> None:
    assert buildmeta.__version__ == PACKAGE_VERSION


def test_public_api() -> None:
    info = buildmeta.InformationalVersion.parse(buildmeta.ZERO_INFORMATIONAL_VERSION)
    assert info.is_valid_syntax
    assert buildmeta.PackageQualityFilter.parse("") == buildmeta.UNBOUNDED
    assert buildmeta.SVersion.try_parse(buildmeta.ZERO_VERSION_TEXT).is_valid_syntax


def test_setup_logging_exported() -> None:
    assert callable(buildmeta.setup_logging)
