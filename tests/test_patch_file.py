"""End-to-end lexing of a complete patch file."""

from __future__ import annotations

from pathlib import Path

import pytest

from jbpl import Lexer, lex
from jbpl.tokens import TokenKind as K

FIXTURE = Path(__file__).parent / "fixtures" / "greeting.jbpl"


@pytest.fixture
def source() -> str:
    return FIXTURE.read_text()


def test_covers_file(source: str) -> None:
    assert "".join(t.value for t in lex(source)) == source


def test_no_unclassified_text(source: str) -> None:
    assert K.ERROR not in {t.kind for t in lex(source)}


def test_all_states_closed(source: str) -> None:
    lexer = Lexer(source)
    list(lexer.tokenize())
    assert lexer.depth == 0


@pytest.mark.parametrize(
    ("kind", "value"),
    [
        (K.COMMENT_SINGLE, "// Patch the greeting"),
        (K.KEYWORD, "include"),
        (K.NAME_VARIABLE, "GREETING"),
        (K.KEYWORD_TYPE, "string"),
        (K.STRING_INTERPOL, "${"),
        (K.NAME_FUNCTION, "log"),
        (K.OPERATOR_WORD, "getstatic"),
        (K.NAME_CLASS, "<java/lang/System>"),
        (K.OPERATOR_WORD, "invokevirtual"),
        (K.NAME_FUNCTION, "println"),
        (K.NAME_CLASS, "<com/example/Main>"),
        (K.NAME_FUNCTION, "main"),
        (K.NAME_FUNCTION, "head"),
        (K.COMMENT_MULTILINE, "/* say hi */"),
        (K.OPERATOR_WORD, "iconst_1"),
        (K.OPERATOR_WORD, "ifeq"),
        (K.KEYWORD, "^return"),
    ],
)
def test_contains(source: str, kind: K, value: str) -> None:
    assert (kind, value) in [(t.kind, t.value) for t in lex(source)]
