"""JBPL rule tables.

Each state's rules are tried top to bottom and the first match wins, so
order matters: declaration dispatch comes before the keyword sets, the
keyword sets before literals, and the plain-name rule comes last.

The tables are flattened once at import into RULES.
"""

from __future__ import annotations

from jbpl.lexer.modes import LexerState
from jbpl.lexer.patterns import (
    BIN_LITERAL,
    CHAR_LITERAL,
    CLASS_TYPE,
    DEC_LITERAL,
    FLOAT_LITERAL,
    HEX_LITERAL,
    NAME,
    OCT_LITERAL,
    PUNCTUATION,
    SPECIAL_KEYWORD,
    WORD_PRIORITY,
    LineBlockComment,
    WordSet,
)
from jbpl.lexer.rules import Include, Pop, Push, Replace, Rule, RuleTable, build_rule_table, rule
from jbpl.tokens import TokenKind as K

S = LexerState

_LERP_OPEN = r"\$\{"


def _declaration(keyword: str, state: LexerState, guard: str = "") -> Rule:
    """``keyword`` followed by whitespace opens a declaration header."""
    return rule(rf"\b({keyword})(\s+){guard}", (K.KEYWORD, K.TEXT), Push(state))


def _scope_reference(keyword: str) -> Rule:
    """``fun.name`` / ``field.name`` refer to a member of the current scope."""
    return rule(
        rf"\b({keyword})(\s*)(\.)(\s*)({NAME})",
        (K.KEYWORD, K.TEXT, K.PUNCTUATION, K.TEXT, K.NAME_VARIABLE),
    )


_BODY: list[Rule | Include] = [
    # Declaration headers
    rule(r"(\^class)(\s+)", (K.KEYWORD, K.TEXT), Push(S.PREPRO_CLASS)),
    _declaration("fun", S.FUNCTION, guard=r"(?![)=\s])"),
    _declaration("inject", S.FUNCTION, guard=r"(?![)=\s])"),
    _declaration("macro", S.MACRO),
    _declaration("field", S.FIELD),
    _declaration("define", S.DEFINE),
    rule(rf"\b(type)(\s+)({NAME})", (K.KEYWORD, K.TEXT, K.NAME_CLASS)),
    _declaration("by", S.SELECTION),
    _scope_reference("fun"),
    _scope_reference("field"),
    # Macro invocation on a typed or result expression: <Foo>.name( / }.name(
    rule(
        rf"(?<=[>}}])(\.)({NAME})(\()",
        (K.PUNCTUATION, K.NAME_FUNCTION, K.PUNCTUATION),
        Push(S.MACRO_CALL),
    ),
    # Field and function signature names
    rule(
        rf"(\.)(\s*)({NAME})(\s*)(?=:)",
        (K.PUNCTUATION, K.TEXT, K.NAME_VARIABLE_INSTANCE, K.TEXT),
    ),
    rule(
        rf"(\.)(\s*)({NAME})(\s*)(?=\()",
        (K.PUNCTUATION, K.TEXT, K.NAME_FUNCTION, K.TEXT),
    ),
    # Reserved words, highest priority first
    rule(SPECIAL_KEYWORD, K.KEYWORD),
    *(rule(WordSet(words), kind) for words, kind in WORD_PRIORITY),
    # Whitespace and comments
    rule(r"[^\S\n]+", K.TEXT),
    rule(r"\\\n", K.TEXT),  # line continuation
    rule(r"//[^\n]*", K.COMMENT_SINGLE),
    rule(LineBlockComment(), K.COMMENT_MULTILINE),
    rule(r"/\*", K.COMMENT_MULTILINE, Push(S.COMMENT)),
    rule(r"\n", K.TEXT),
    Include(S.LITERAL),
    rule(CLASS_TYPE, K.NAME_CLASS),
    # Brackets keep the stack symmetrical
    rule(r"\)", K.PUNCTUATION, Pop()),
    rule(r"\(", K.PUNCTUATION, Push(S.BODY)),
    rule(r"\]", K.PUNCTUATION, Pop()),
    rule(r"\[", K.PUNCTUATION, Push(S.BODY)),
    rule(_LERP_OPEN, K.KEYWORD, Push(S.LERP)),
    rule(r"\{", K.PUNCTUATION, Push(S.BODY)),
    rule(r"\}", K.PUNCTUATION, Pop()),
    rule(PUNCTUATION, K.PUNCTUATION),
    rule(NAME, K.NAME_VARIABLE),
]

_LITERAL: list[Rule | Include] = [
    rule(r'"', K.STRING_DOUBLE, Push(S.STRING)),
    rule(CHAR_LITERAL, K.STRING_CHAR),
    rule(BIN_LITERAL, K.NUMBER_BIN),
    rule(HEX_LITERAL, K.NUMBER_HEX),
    rule(OCT_LITERAL, K.NUMBER_OCT),
    rule(FLOAT_LITERAL, K.NUMBER_FLOAT),
    rule(DEC_LITERAL, K.NUMBER_INTEGER),
]

_STRING: list[Rule | Include] = [
    rule(r'"', K.STRING_DOUBLE, Pop()),
    rule(_LERP_OPEN, K.STRING_INTERPOL, Push(S.STRING_LERP)),
    rule(r'[^"${}]+', K.STRING_DOUBLE),
    rule(r"[${}]", K.STRING_DOUBLE),  # stray interpolation characters are text
]

_WHITESPACE = rule(r"\s+", K.TEXT)

GRAMMAR: dict[LexerState, list[Rule | Include]] = {
    S.ROOT: [Include(S.BODY)],
    S.BODY: _BODY,
    S.LITERAL: _LITERAL,
    S.STRING: _STRING,
    S.STRING_LERP: [
        rule(r"\}", K.STRING_INTERPOL, Pop()),
        Include(S.BODY),
    ],
    S.LERP: [
        rule(r"\}", K.KEYWORD, Pop()),
        Include(S.BODY),
    ],
    S.SELECTION: [
        rule(NAME, K.NAME_FUNCTION, Pop()),
    ],
    S.PREPRO_CLASS: [
        rule(NAME, K.NAME_CLASS, Pop()),
    ],
    S.MACRO: [
        rule(NAME, K.NAME_FUNCTION, Pop()),
        rule(_LERP_OPEN, K.KEYWORD, Replace(S.LERP)),
        _WHITESPACE,
    ],
    S.MACRO_CALL: [
        rule(r"\)", K.PUNCTUATION, Pop()),
        Include(S.BODY),
    ],
    S.DEFINE: [
        rule(NAME, K.NAME_VARIABLE, Pop()),
        rule(_LERP_OPEN, K.KEYWORD, Replace(S.LERP)),
        _WHITESPACE,
        rule(PUNCTUATION, K.PUNCTUATION),
    ],
    S.FIELD: [
        rule(CLASS_TYPE, K.NAME_CLASS),
        rule(NAME, K.NAME_VARIABLE_INSTANCE, Pop()),
        rule(_LERP_OPEN, K.KEYWORD, Replace(S.LERP)),
        _WHITESPACE,
        rule(PUNCTUATION, K.PUNCTUATION),
    ],
    S.FUNCTION: [
        rule(CLASS_TYPE, K.NAME_CLASS),
        rule(rf"(\.)({NAME})", (K.PUNCTUATION, K.NAME_FUNCTION), Pop()),
        rule(rf"(\.)(<{NAME}>)", (K.PUNCTUATION, K.NAME_FUNCTION), Pop()),  # <init>, <clinit>
        rule(_LERP_OPEN, K.KEYWORD, Replace(S.LERP)),
        _WHITESPACE,
        rule(PUNCTUATION, K.PUNCTUATION),
    ],
    S.COMMENT: [
        rule(r"/\*", K.COMMENT_MULTILINE, Push(S.COMMENT)),
        rule(r"\*/", K.COMMENT_MULTILINE, Pop()),
        rule(r"[^/*]+", K.COMMENT_MULTILINE),
        rule(r"[/*]", K.COMMENT_MULTILINE),
    ],
}

RULES: RuleTable = build_rule_table(GRAMMAR)
