"""Unit tests for the SVersion wrapper."""

import pytest

from buildmeta.core.sversion import ZERO_VERSION_TEXT, SVersion


class TestTryParse:
    """Tests for SVersion.try_parse()."""

    @pytest.mark.parametrize("text", ["1.0.0", "2.3.4-alpha.1", "0.0.0-0", "10.20.30-rc.2"])
    def test_valid(self, text: str) -> None:
        version = SVersion.try_parse(text)
        assert version.is_valid_syntax
        assert version.text == text
        assert version.error_message is None
        assert version.normalized_text == text

    @pytest.mark.parametrize("text", ["v1.0.0", "1.0", "not a version", "1.0.0.0"])
    def test_invalid_never_raises(self, text: str) -> None:
        version = SVersion.try_parse(text)
        assert not version.is_valid_syntax
        assert version.parsed is None
        assert version.text == text
        assert version.error_message

    @pytest.mark.parametrize("text", [None, "", "  "])
    def test_empty(self, text: str | None) -> None:
        version = SVersion.try_parse(text)
        assert not version.is_valid_syntax
        assert version.text == text


class TestZero:
    def test_zero_version(self) -> None:
        assert ZERO_VERSION_TEXT == "0.0.0-0"
        assert SVersion.ZERO.is_valid_syntax
        assert str(SVersion.ZERO) == "0.0.0-0"


class TestComparison:
    """Tests for equality and ordering."""

    def test_equality_by_value(self) -> None:
        assert SVersion.try_parse("1.2.3") == SVersion.try_parse("1.2.3")
        assert SVersion.try_parse("1.2.3") != SVersion.try_parse("1.2.4")
        assert hash(SVersion.try_parse("1.2.3")) == hash(SVersion.try_parse("1.2.3"))

    def test_invalid_equality_by_text(self) -> None:
        assert SVersion.try_parse("bad") == SVersion.try_parse("bad")
        assert SVersion.try_parse("bad") != SVersion.try_parse("1.0.0")

    def test_ordering(self) -> None:
        assert SVersion.try_parse("1.0.0-alpha") < SVersion.try_parse("1.0.0")
        assert SVersion.try_parse("1.0.0") < SVersion.try_parse("1.1.0")
        assert SVersion.ZERO < SVersion.try_parse("0.0.1")

    def test_ordering_invalid_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = SVersion.try_parse("bad") < SVersion.try_parse("1.0.0")


class TestImmutability:
    """Tests that SVersion values cannot be changed after construction."""

    @pytest.mark.parametrize("field", ["text", "parsed", "error_message"])
    def test_zero_fields_are_read_only(self, field: str) -> None:
        with pytest.raises(AttributeError):
            setattr(SVersion.ZERO, field, None)
        assert SVersion.ZERO.is_valid_syntax
        assert SVersion.ZERO.text == "0.0.0-0"

    def test_hash_stable(self) -> None:
        assert hash(SVersion.ZERO) == hash(SVersion.try_parse("0.0.0-0"))
