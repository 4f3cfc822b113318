"""Tests for alphabet configuration."""

from __future__ import annotations

import pytest

from lb64 import (
    IMAP,
    MIME,
    STANDARD,
    URL_SAFE,
    URL_SAFE_NO_PADDING,
    URL_SAFE_PADDING,
    AlphabetConfig,
    ConfigError,
    DuplicateSymbolError,
    InvalidLengthError,
    PaddingCollisionError,
    UnrepresentableSymbolError,
)

ALPHANUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"


def test_builtin_symbols() -> None:
    """Test the two variant symbols and padding of each built-in config."""
    assert STANDARD.alphabet[62:] == "+/"
    assert STANDARD.padding_symbol == "="
    assert URL_SAFE.alphabet[62:] == "-_"
    assert URL_SAFE.padding_symbol is None
    assert URL_SAFE_NO_PADDING is URL_SAFE
    assert URL_SAFE_PADDING.alphabet == URL_SAFE.alphabet
    assert URL_SAFE_PADDING.padding_symbol == "="
    assert MIME.alphabet[62:] == "+/"
    assert MIME.padding_symbol == "="
    assert IMAP.alphabet[62:] == "+,"
    assert IMAP.padding_symbol is None


def test_equality_ignores_name() -> None:
    """Test that MIME and STANDARD compare equal and hash alike."""
    assert MIME == STANDARD
    assert hash(MIME) == hash(STANDARD)
    assert STANDARD != IMAP
    assert URL_SAFE != URL_SAFE_PADDING


def test_symbol_lookup() -> None:
    """Test that symbol_at and index_of are inverse."""
    for value in range(64):
        assert STANDARD.index_of(STANDARD.symbol_at(value)) == value
    assert IMAP.symbol_at(63) == ","
    assert STANDARD.index_of("=") is None
    assert STANDARD.index_of("-") is None


def test_validate_accepts_custom_alphabet() -> None:
    """Test a reversed alphabet given as a list of characters."""
    config = AlphabetConfig.validate(list(reversed(ALPHANUMERIC + "+/")), "=")

    assert config.symbol_at(0) == "/"
    assert config.index_of("A") == 63
    assert str(config) == "/+" + ALPHANUMERIC[::-1] + "="


@pytest.mark.parametrize("alphabet", [ALPHANUMERIC + "+", ALPHANUMERIC + "+/-", ""])
def test_validate_rejects_wrong_length(alphabet: str) -> None:
    """Test that alphabets without exactly 64 symbols are rejected."""
    with pytest.raises(InvalidLengthError):
        AlphabetConfig.validate(alphabet)


def test_validate_rejects_duplicate_symbol() -> None:
    """Test that a repeated symbol is rejected."""
    with pytest.raises(DuplicateSymbolError):
        AlphabetConfig.validate(ALPHANUMERIC + "++")


def test_validate_rejects_padding_collision() -> None:
    """Test that a padding symbol taken from the alphabet is rejected."""
    with pytest.raises(PaddingCollisionError):
        AlphabetConfig.validate(ALPHANUMERIC + "+/", "/")


@pytest.mark.parametrize(
    "alphabet, padding",
    [
        (ALPHANUMERIC + "+\0", None),
        (ALPHANUMERIC + "+ ", None),
        (ALPHANUMERIC + "+/", "\n"),
        (list(ALPHANUMERIC + "+") + ["//"], None),
    ],
)
def test_validate_rejects_unrepresentable_symbol(alphabet, padding) -> None:
    """Test that control characters, whitespace and multi-character entries are rejected."""
    with pytest.raises(UnrepresentableSymbolError):
        AlphabetConfig.validate(alphabet, padding)


def test_config_errors_share_base_class() -> None:
    """Test that every configuration failure is a ConfigError."""
    with pytest.raises(ConfigError):
        AlphabetConfig.validate("short")


def test_constructor_validates() -> None:
    """Test that building the dataclass directly runs the same checks."""
    with pytest.raises(DuplicateSymbolError):
        AlphabetConfig(ALPHANUMERIC + "AA")


def test_with_padding() -> None:
    """Test copying a config with a different padding symbol."""
    padded = URL_SAFE.with_padding("=")

    assert padded == URL_SAFE_PADDING
    assert URL_SAFE.padding_symbol is None
    assert STANDARD.with_padding(None).padding_symbol is None
    with pytest.raises(PaddingCollisionError):
        URL_SAFE.with_padding("_")


def test_config_is_immutable() -> None:
    """Test that configs cannot be modified after construction."""
    with pytest.raises(AttributeError):
        STANDARD.padding_symbol = "."  # type: ignore[misc]


@pytest.mark.parametrize("padding", [5, "", "=="])
def test_validate_rejects_padding_that_is_not_one_character(padding) -> None:
    """Test that non-string, empty and multi-character padding is unrepresentable."""
    with pytest.raises(UnrepresentableSymbolError):
        AlphabetConfig.validate(STANDARD.alphabet, padding)


def test_validate_checks_length_before_entries() -> None:
    """Test that a sequence of the wrong size fails on length even with bad entries."""
    with pytest.raises(InvalidLengthError):
        AlphabetConfig.validate(list(ALPHANUMERIC + "+/") + ["//"])


def test_with_padding_drops_name() -> None:
    """Test that a re-padded copy no longer carries the original label."""
    padded = URL_SAFE.with_padding("=")

    assert padded.name is None
    assert "URL_SAFE" not in repr(padded)
    assert URL_SAFE.name == "URL_SAFE"
