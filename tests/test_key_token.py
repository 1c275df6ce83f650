import pytest

from shape_verifier.models.key_token import (
    WILDCARD_MARKER,
    KeyKind,
    KeyToken,
    classify_key,
    extract_optional_name,
    is_malformed_optional,
)


def test_plain_key_is_exact():
    assert classify_key("name") == KeyToken("name", KeyKind.EXACT)


def test_exact_key_is_kept_verbatim():
    token = classify_key("  spaced key ")
    assert token.kind is KeyKind.EXACT
    assert token.canonical_name == "  spaced key "


@pytest.mark.parametrize("raw", ["[*:key]", "  [*:key]", "[*:key]\t", " [*:key] "])
def test_wildcard_ignores_surrounding_whitespace(raw):
    token = classify_key(raw)
    assert token.kind is KeyKind.WILDCARD
    assert token.canonical_name == raw
    assert token.is_wildcard


def test_wildcard_marker_constant():
    assert classify_key(WILDCARD_MARKER).is_wildcard


def test_optional_key_extracts_inner_name():
    token = classify_key("[opt:key:extra]")
    assert token == KeyToken("extra", KeyKind.OPTIONAL)
    assert token.is_optional


def test_optional_inner_name_may_contain_colons():
    assert classify_key("[opt:key:a:b]").canonical_name == "a:b"


@pytest.mark.parametrize(
    "raw",
    [
        "[opt:key:]",
        "[opt:key:extra",
        "opt:key:extra]",
        "[opt:extra]",
        "[*:key]x",
        "[*]",
    ],
)
def test_malformed_markers_degrade_to_exact(raw):
    token = classify_key(raw)
    assert token.kind is KeyKind.EXACT
    assert token.canonical_name == raw


def test_empty_optional_is_reported_as_malformed():
    assert is_malformed_optional("[opt:key:]")
    assert not is_malformed_optional("[opt:key:x]")
    assert not is_malformed_optional("plain")


def test_extract_optional_name_rejects_non_strings():
    assert extract_optional_name(3) is None


def test_non_string_key_uses_text_form():
    token = classify_key(1)
    assert token == KeyToken("1", KeyKind.EXACT)


def test_tokens_are_immutable():
    token = classify_key("name")
    with pytest.raises(AttributeError):
        token.kind = KeyKind.OPTIONAL
