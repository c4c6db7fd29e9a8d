"""Unit tests for the Rich display components."""

from rich.console import Console

from buildmeta.core.informational_version import InformationalVersion
from buildmeta.core.quality_filter import PackageQualityFilter
from buildmeta.ui import THEME, show_informational_version, show_quality_filter


def _output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


class TestDisplayFunctions:
    """Test display functions."""

    def test_theme(self) -> None:
        for key in ("valid", "invalid", "missing"):
            assert isinstance(THEME[key], str)

    def test_show_zero_informational_version(self, console: Console) -> None:
        show_informational_version(console, InformationalVersion.ZERO)
        output = _output(console)
        assert "0.0.0-0" in output
        assert "0" * 40 in output
        assert "0001-01-01 00:00:00Z" in output
        assert "√" in output

    def test_show_null_informational_version(self, console: Console) -> None:
        show_informational_version(console, InformationalVersion.parse(None))
        output = _output(console)
        assert "[null OriginalInformationalVersion]" in output
        assert "×" in output

    def test_show_quality_filter(self, console: Console) -> None:
        show_quality_filter(console, PackageQualityFilter.parse("Exploratory-Preview"))
        output = _output(console)
        assert "Exploratory-Preview" in output
        assert "ReleaseCandidate" in output
        assert output.count("√") == 2
        assert output.count("×") == 3
