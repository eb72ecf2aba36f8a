"""Tests for the lexer's state stack.

These tests verify that brackets, strings, interpolations and declaration
headers push and pop exactly the states they should, and that unbalanced
input leaves the expected residual states without failing.
"""

from __future__ import annotations

import pytest

from jbpl import Lexer, lex
from jbpl.lexer import LexerState
from jbpl.tokens import TokenKind

S = LexerState


def run(source: str) -> Lexer:
    lexer = Lexer(source)
    list(lexer.tokenize())
    return lexer


class TestInitialState:
    def test_starts_at_root(self) -> None:
        lexer = Lexer("nop")
        assert lexer.stack == (S.ROOT,)
        assert lexer.depth == 0
        assert lexer.pos == 0

    def test_cursor_reaches_end(self) -> None:
        assert run("iload 0").pos == len("iload 0")


class TestBrackets:
    @pytest.mark.parametrize("opener", ["(", "[", "{"])
    def test_opener_pushes_body(self, opener: str) -> None:
        assert run(opener).stack == (S.ROOT, S.BODY)

    @pytest.mark.parametrize("pair", ["()", "[]", "{}", "([{}])"])
    def test_balanced_pairs_return_to_root(self, pair: str) -> None:
        assert run(pair).depth == 0

    @pytest.mark.parametrize("closer", [")", "]", "}", ")))"])
    def test_closer_at_root_keeps_root(self, closer: str) -> None:
        lexer = run(closer)
        assert lexer.stack == (S.ROOT,)

    def test_closer_at_root_is_punctuation(self) -> None:
        assert [t.kind for t in lex(")")] == [TokenKind.PUNCTUATION]

    @pytest.mark.parametrize("source", ["( }", "{ )", "[ }", "( } )"])
    def test_mismatched_closer_pops_innermost_level(self, source: str) -> None:
        lexer = run(source)
        assert lexer.stack == (S.ROOT,)
        kinds = {t.kind for t in lex(source)}
        assert kinds == {TokenKind.PUNCTUATION, TokenKind.TEXT}

    def test_brace_inside_interpolation_does_not_close_it(self) -> None:
        assert run("${ { }").stack == (S.ROOT, S.LERP)
        assert run("${ { } }").stack == (S.ROOT,)


class TestDeclarationStates:
    @pytest.mark.parametrize(
        ("source", "state"),
        [
            ("fun ", S.FUNCTION),
            ("inject ", S.FUNCTION),
            ("macro ", S.MACRO),
            ("field ", S.FIELD),
            ("define ", S.DEFINE),
            ("by ", S.SELECTION),
            ("^class ", S.PREPRO_CLASS),
        ],
    )
    def test_header_keyword_pushes_state(self, source: str, state: LexerState) -> None:
        assert run(source).stack == (S.ROOT, state)

    @pytest.mark.parametrize(
        "source",
        ["fun <A> .b", "inject .<clinit>", "macro m", "field f", "define d", "by f", "^class C"],
    )
    def test_header_pops_after_name(self, source: str) -> None:
        assert run(source).depth == 0

    @pytest.mark.parametrize("keyword", ["macro", "define", "field", "fun"])
    def test_interpolation_replaces_header(self, keyword: str) -> None:
        assert run(f"{keyword} ${{").stack == (S.ROOT, S.LERP)

    def test_fun_followed_by_paren_is_not_a_header(self) -> None:
        assert run("fun )").stack == (S.ROOT,)

    def test_field_header_tolerates_whitespace_and_punctuation(self) -> None:
        kinds = [t.kind for t in lex("field <A>\n  : name")]
        assert TokenKind.ERROR not in kinds
        assert kinds[-1] is TokenKind.NAME_VARIABLE_INSTANCE


class TestUnterminated:
    """Unbalanced input completes with residual states."""

    def test_unterminated_string(self) -> None:
        lexer = run('"abc')
        assert lexer.stack == (S.ROOT, S.STRING)
        assert [(t.kind, t.value) for t in lex('"abc')] == [
            (TokenKind.STRING_DOUBLE, '"abc'),
        ]

    def test_unterminated_string_swallows_rest_of_file(self) -> None:
        source = '"abc\nnop\n'
        assert [t.kind for t in lex(source)] == [TokenKind.STRING_DOUBLE]

    def test_unterminated_interpolation(self) -> None:
        assert run('"a${b').stack == (S.ROOT, S.STRING, S.STRING_LERP)

    def test_unterminated_block_comment(self) -> None:
        source = "/* never\nclosed"
        assert run(source).stack == (S.ROOT, S.COMMENT)
        assert [(t.kind, t.value) for t in lex(source)] == [
            (TokenKind.COMMENT_MULTILINE, source),
        ]

    def test_selection_without_name_falls_back(self) -> None:
        lexer = Lexer("by 1")
        tokens = list(lexer.tokenize())
        assert tokens[-1].kind is TokenKind.ERROR
        assert tokens[-1].value == "1"
        assert lexer.stack == (S.ROOT, S.SELECTION)

    def test_fallback_does_not_change_stack(self) -> None:
        assert run("(#").stack == (S.ROOT, S.BODY)
