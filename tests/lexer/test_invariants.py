"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from jbpl import LexConfig, Lexer, lex
from jbpl.tokens import TokenKind

# Characters that drive state changes, plus a few words that open headers
JBPL_FRAGMENTS = st.lists(
    st.sampled_from(
        [
            "fun ", "inject ", "field ", "macro ", "define ", "by ", "^class ",
            "type ", "<A/B>", "<", ">", ".", "(", ")", "[", "]", "{", "}",
            "${", '"', "'", "/*", "*/", "//", "\n", " ", "\\", ":", "$",
            "nop", "x", "0x1F", "3.5e2f64", "42i32", "#",
        ]
    ),
    max_size=60,
).map("".join)


class TestCoverage:
    """Token values always reconstruct the source exactly."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_raw_tokens_reconstruct_source(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert "".join(t.value for t in tokens) == source

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=300)
    def test_jbpl_fragments_reconstruct_source(self, source: str) -> None:
        tokens = lex(source)
        assert "".join(t.value for t in tokens) == source

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=200)
    def test_spans_are_contiguous(self, source: str) -> None:
        expected_start = 0
        for token in Lexer(source).tokenize():
            assert token.start == expected_start
            assert token.end > token.start, "tokens are never empty"
            assert source[token.start : token.end] == token.value
            expected_start = token.end
        assert expected_start == len(source)


class TestTermination:
    """Every step consumes input."""

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=100)
    def test_raw_token_count_bounded_by_length(self, source: str) -> None:
        tokens = list(Lexer(source, config=LexConfig(coalesce=False)).tokenize())
        assert len(tokens) <= len(source)

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=100)
    def test_stack_never_loses_root(self, source: str) -> None:
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer.depth >= 0
        assert lexer.stack[0].value == "root"


class TestCoalescing:
    """Coalescing merges only adjacent same-kind tokens, never errors."""

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=100)
    def test_no_adjacent_tokens_share_a_kind(self, source: str) -> None:
        tokens = lex(source)
        for left, right in zip(tokens, tokens[1:]):
            assert left.kind is not right.kind or left.kind is TokenKind.ERROR

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=100)
    def test_coalesced_kinds_follow_raw_kinds(self, source: str) -> None:
        raw = [t.kind for t in Lexer(source).tokenize()]
        collapsed = [
            k for i, k in enumerate(raw) if i == 0 or raw[i - 1] is not k or k is TokenKind.ERROR
        ]
        assert [t.kind for t in lex(source)] == collapsed

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=100)
    def test_error_tokens_stay_single_characters(self, source: str) -> None:
        for token in lex(source):
            if token.kind is TokenKind.ERROR:
                assert len(token.value) == 1


class TestDeterminism:
    """Test that tokenization is deterministic."""

    @given(JBPL_FRAGMENTS)
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first_result = [(t.kind, t.value) for t in lex(source)]
        second_result = [(t.kind, t.value) for t in lex(source)]

        assert first_result == second_result


class TestBoundaryConditions:
    """Test boundary conditions and edge cases."""

    @pytest.mark.parametrize("depth", [1, 10, 1000, 5000])
    def test_deep_nesting_has_no_recursion_limit(self, depth: int) -> None:
        source = "(" * depth + ")" * depth
        lexer = Lexer(source)
        tokens = list(lexer.tokenize())
        assert len(tokens) == 2 * depth
        assert lexer.depth == 0

    @pytest.mark.parametrize("depth", [1, 50, 500])
    def test_deeply_nested_interpolation(self, depth: int) -> None:
        source = '"${' * depth + "x" + '}"' * depth
        lexer = Lexer(source)
        list(lexer.tokenize())
        assert lexer.depth == 0

    @pytest.mark.parametrize("length", [0, 1, 2, 10, 100, 1000])
    def test_various_source_lengths(self, length: int) -> None:
        source = "a" * length
        tokens = lex(source)
        assert "".join(t.value for t in tokens) == source
        if length:
            assert [t.kind for t in tokens] == [TokenKind.NAME_VARIABLE]

    @pytest.mark.parametrize("line_ending", ["\n", "\r\n"])
    def test_line_ending_styles(self, line_ending: str) -> None:
        source = f"iload 0{line_ending}istore 1{line_ending}"
        tokens = lex(source)
        assert "".join(t.value for t in tokens) == source
        assert TokenKind.ERROR not in {t.kind for t in tokens}
