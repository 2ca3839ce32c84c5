"""Map raw tree-sitter node kinds to identifier-safe method suffixes.

Named rules (``add_expr``) are already valid identifiers and pass through.
Anonymous tokens (``","``, ``"+="``) are spelled out with fixed mnemonics so
that ``"+="`` becomes ``PLUS_EQ`` and ``"a,b"`` becomes ``a_COMMA_b``.
Characters outside both sets are dropped.
"""

from __future__ import annotations

import logging
import string

logger = logging.getLogger(__name__)

PASS_THROUGH = frozenset(string.ascii_letters + string.digits + "_")

SUBSTITUTIONS: dict[str, str] = {
    "~": "TILDE",
    "`": "BQUOTE",
    "!": "BANG",
    "@": "AT",
    "#": "POUND",
    "$": "DOLLAR",
    "%": "PERCENT",
    "^": "CARET",
    "&": "AMP",
    "*": "STAR",
    "(": "LPAREN",
    ")": "RPAREN",
    "-": "DASH",
    "+": "PLUS",
    "=": "EQ",
    "{": "LBRACE",
    "}": "RBRACE",
    "[": "LBRACK",
    "]": "RBRACK",
    "\\": "BSLASH",
    "|": "PIPE",
    ":": "COLON",
    ";": "SEMI",
    '"': "DQUOTE",
    "'": "SQUOTE",
    "<": "LT",
    ">": "GT",
    ",": "COMMA",
    ".": "DOT",
    "?": "QMARK",
    "/": "SLASH",
    "\n": "LF",
    "\r": "CR",
    "\t": "TAB",
}


def sanitize_identifier(raw_name: str) -> str:
    """Return the method suffix for ``raw_name``.

    The result may be empty (``""`` or a name made only of unsupported
    characters) and is not guaranteed to be unique across raw names.
    """
    parts: list[str] = []
    for char in raw_name:
        if char in PASS_THROUGH:
            parts.append(char)
            continue
        replacement = SUBSTITUTIONS.get(char)
        if replacement is None:
            logger.debug("Dropping character %r from node kind %r", char, raw_name)
            continue
        if parts and not parts[-1].endswith("_"):
            parts.append("_")
        parts.append(replacement)
    return "".join(parts)


def method_name(raw_name: str) -> str:
    """Return the generated ``visit_<identifier>`` method name for a kind."""
    return f"visit_{sanitize_identifier(raw_name)}"


__all__ = ["PASS_THROUGH", "SUBSTITUTIONS", "sanitize_identifier", "method_name"]
