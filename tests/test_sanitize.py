import logging
import string

import pytest

from tree_sitter_visitor.sanitize import (
    SUBSTITUTIONS,
    method_name,
    sanitize_identifier,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("fizz", "fizz"),
        ("add_expr", "add_expr"),
        ("_expr", "_expr"),
        ("Node42", "Node42"),
        (",", "COMMA"),
        ("a,b", "a_COMMA_b"),
        ("+=", "PLUS_EQ"),
        ("==", "EQ_EQ"),
        ("->", "DASH_GT"),
        ("a_,", "a_COMMA"),
        ("_,", "_COMMA"),
        (",a", "COMMAa"),
        ("\n", "LF"),
        ("\r\n", "CR_LF"),
        ("\t", "TAB"),
        ("\\", "BSLASH"),
        ('"', "DQUOTE"),
        ("'", "SQUOTE"),
        ("", ""),
    ],
)
def test_sanitize_known_names(raw, expected):
    assert sanitize_identifier(raw) == expected


def test_every_table_entry_maps_to_its_mnemonic():
    for char, mnemonic in SUBSTITUTIONS.items():
        assert sanitize_identifier(char) == mnemonic


def test_identifier_safe_names_are_unchanged():
    for raw in ["fizz", "source_file", "visit", "x1", "__init__", string.ascii_letters]:
        assert sanitize_identifier(raw) == raw
        assert sanitize_identifier(sanitize_identifier(raw)) == raw


def test_special_pairs_never_lead_or_double_underscores():
    specials = list(SUBSTITUTIONS)
    for first in specials:
        for second in specials:
            result = sanitize_identifier(first + second)
            assert not result.startswith("_")
            assert "__" not in result
            assert result == f"{SUBSTITUTIONS[first]}_{SUBSTITUTIONS[second]}"


def test_unsupported_characters_are_dropped(caplog):
    with caplog.at_level(logging.DEBUG, logger="tree_sitter_visitor.sanitize"):
        assert sanitize_identifier("é") == ""
        assert sanitize_identifier("naïve") == "nave"
        assert sanitize_identifier("a é,") == "a_COMMA"
    assert any("Dropping character" in r.getMessage() for r in caplog.records)


def test_sanitize_is_total():
    samples = ["", " ", "λ", "🙂", "a b", "((", "0", "if", "visit", "\x00", "a" * 200]
    for raw in samples:
        name = method_name(raw)
        assert name.isidentifier()
        assert sanitize_identifier(raw) == sanitize_identifier(raw)


def test_method_name_prefix():
    assert method_name(",") == "visit_COMMA"
    assert method_name("") == "visit_"
