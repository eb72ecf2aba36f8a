"""Pattern library for JBPL.

Keyword and mnemonic sets, character classes and literal grammars. Everything
here is built once at import and never mutated.

All sets are frozensets for:
- O(1) membership testing after a single word match
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Regex sources are kept as strings so the grammar can compose them; the
grammar compiles them with ``re.ASCII`` so ``\\w``, ``\\b`` and ``\\s`` only
consider ASCII characters.

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from itertools import product
from types import MappingProxyType

from jbpl.tokens import TokenKind

# =============================================================================
# Keywords
# =============================================================================

KEYWORDS: frozenset[str] = frozenset(
    {
        # Preprocessor queries
        "typeof", "opcodeof", "sizeof",
        # Declarations
        "yeet", "inject", "field", "fun", "class", "macro",
        # Modifiers
        "public", "protected", "private", "static", "sync", "final",
        "transient", "volatile",
        # Directives
        "info", "error", "assert", "version", "define", "include",
        # Control flow
        "if", "else", "when", "for", "break", "continue", "default",
        # Operators and selectors
        "this", "is", "as", "in", "by",
    }
)  # fmt: skip

# Keywords that also stand in for a type name
PREPRO_TYPE_KEYWORDS: frozenset[str] = frozenset({"type", "opcode", "instruction", "signature"})

INT_TYPES: tuple[str, ...] = ("i8", "i16", "i32", "i64")
FLOAT_TYPES: tuple[str, ...] = ("f32", "f64")

TYPE_KEYWORDS: frozenset[str] = frozenset({"void", "char", "bool", "string", *INT_TYPES, *FLOAT_TYPES})

CONSTANT_KEYWORDS: frozenset[str] = frozenset({"true", "false"})

# Preprocessor keywords; the caret keeps them apart from user names
SPECIAL_KEYWORDS: frozenset[str] = frozenset({"^return", "^class"})

# =============================================================================
# Instruction mnemonics
# =============================================================================


def _expand(prefixes: str, suffixes: tuple[str, ...] | list[str]) -> set[str]:
    return {p + s for p, s in product(prefixes, suffixes)}


_CMP = ("eq", "ne", "lt", "ge", "gt", "le")

MNEMONICS_BY_CATEGORY: Mapping[str, frozenset[str]] = MappingProxyType({
    "const": frozenset(
        {"ldc", "bipush", "sipush", "aconst_null", "iconst_m1"}
        | {f"iconst_{i}" for i in range(6)}
        | {f"lconst_{i}" for i in range(2)}
        | {f"fconst_{i}" for i in range(3)}
        | {f"dconst_{i}" for i in range(2)}
    ),
    "stack": frozenset(
        _expand("ilfda", ("load", "store"))
        | {"dup", "dup_x1", "dup_x2", "dup2", "dup2_x1", "dup2_x2", "pop", "pop2"}
    ),
    "field": frozenset({"getfield", "getstatic", "putfield", "putstatic"}),
    "jump": frozenset({"goto", "jsr", "ret"}),
    "conv": frozenset(
        _expand("i", ["2" + c for c in "bcdfls"])
        | _expand("f", ["2" + c for c in "dil"])
        | _expand("d", ["2" + c for c in "fil"])
        | _expand("l", ["2" + c for c in "dfi"])
    ),
    "logic": frozenset(_expand("il", ("ushr", "shl", "shr", "and", "xor", "or"))),
    "arith": frozenset(_expand("ilfd", ("add", "sub", "mul", "div", "rem", "neg"))),
    "array": frozenset(
        {"multianewarray", "arraylength", "anewarray"}
        | _expand("ilfdacsz", ("newarray",))
        | _expand("ilfda", ("aload", "astore"))
    ),
    "misc": frozenset({"monitorenter", "monitorexit", "athrow", "iinc", "nop"}),
    "ctrl": frozenset({"lookupswitch", "tableswitch", "return"} | _expand("ilfda", ("return",))),
    "type": frozenset({"checkcast", "instanceof", "new"}),
    "cond": frozenset(
        {"if_acmpeq", "if_acmpne"} | {f"if{c}" for c in _CMP} | {f"if_icmp{c}" for c in _CMP}
    ),
    "invoke": frozenset(
        "invoke" + kind for kind in ("interface", "virtual", "static", "special", "dynamic")
    ),
})

MNEMONICS: frozenset[str] = frozenset().union(*MNEMONICS_BY_CATEGORY.values())

# Classification order for a bare word. The first set containing the word
# decides its kind; anything else is a plain identifier.
WORD_PRIORITY: tuple[tuple[frozenset[str], TokenKind], ...] = (
    (KEYWORDS, TokenKind.KEYWORD),
    (PREPRO_TYPE_KEYWORDS, TokenKind.KEYWORD),
    (TYPE_KEYWORDS, TokenKind.KEYWORD_TYPE),
    (CONSTANT_KEYWORDS, TokenKind.KEYWORD_CONSTANT),
    (MNEMONICS, TokenKind.OPERATOR_WORD),
)

# =============================================================================
# Regex sources
# =============================================================================

NAME = r"[a-zA-Z_][a-zA-Z0-9_$]*"
PUNCTUATION = r"[$~!%^&*()+=|\[\]:,.<>/?-]"

# <Foo> or <java/lang/Object>
CLASS_TYPE = rf"<{NAME}(?:/{NAME})*>"

SPECIAL_KEYWORD = r"(?:{})\b".format("|".join(re.escape(k) for k in sorted(SPECIAL_KEYWORDS)))

_INT_SUFFIX = "(?:{})?".format("|".join(INT_TYPES))
_FLOAT_SUFFIX = "(?:{})".format("|".join(FLOAT_TYPES))
_DIGITS = r"[0-9][0-9_]*"
_FRACTION = rf"\.{_DIGITS}"
_EXPONENT = rf"[eE][+-]?{_DIGITS}"

BIN_LITERAL = rf"0[bB][01][01_]*{_INT_SUFFIX}"
HEX_LITERAL = rf"0[xX][0-9a-fA-F][0-9a-fA-F_]*{_INT_SUFFIX}"
OCT_LITERAL = rf"0[oO][0-7][0-7_]*{_INT_SUFFIX}"
# A float needs a fraction, an exponent or a float suffix; bare digits are decimal
FLOAT_LITERAL = (
    rf"{_DIGITS}(?:{_FRACTION}(?:{_EXPONENT})?{_FLOAT_SUFFIX}?"
    rf"|{_EXPONENT}{_FLOAT_SUFFIX}?"
    rf"|{_FLOAT_SUFFIX})"
)
DEC_LITERAL = rf"{_DIGITS}{_INT_SUFFIX}"

CHAR_LITERAL = r"'\\.'|'[^\\]'"

# =============================================================================
# Matchers
# =============================================================================

_WORD_RE = re.compile(r"\b\w+", re.ASCII)
_SPAN_RE = re.compile(r".+", re.DOTALL)


class WordSet:
    """Matches a whole ASCII word at a word boundary if it belongs to ``words``.

    Equivalent to the regex ``\\b(?:w1|w2|...)\\b`` over the same words, but a
    single word scan plus a set lookup.
    """

    __slots__ = ("words",)

    def __init__(self, words: frozenset[str]) -> None:
        self.words = words

    def match(self, text: str, pos: int) -> re.Match[str] | None:
        m = _WORD_RE.match(text, pos)
        if m is not None and m.group() in self.words:
            return m
        return None

    def __repr__(self) -> str:
        return f"WordSet({len(self.words)} words)"


class LineBlockComment:
    """Matches a ``/* ... */`` comment that closes on the same line.

    Nested openers are balanced first, so ``/* /* */ */`` is one comment and
    ``/* a */ x /* b */`` is two. When the nesting does not balance but the
    line still holds a ``*/``, the comment runs through the last one. With no
    closer on the line there is no match and the grammar pushes the comment
    state instead.
    """

    __slots__ = ()

    def match(self, text: str, pos: int) -> re.Match[str] | None:
        if not text.startswith("/*", pos):
            return None
        line_end = text.find("\n", pos)
        if line_end == -1:
            line_end = len(text)
        depth = 0
        i = pos
        while i < line_end - 1:
            pair = text[i : i + 2]
            if pair == "/*":
                depth += 1
                i += 2
            elif pair == "*/":
                depth -= 1
                i += 2
                if depth == 0:
                    return _SPAN_RE.match(text, pos, i)
            else:
                i += 1
        last_close = text.rfind("*/", pos + 2, line_end)
        if last_close == -1:
            return None
        return _SPAN_RE.match(text, pos, last_close + 2)

    def __repr__(self) -> str:
        return "LineBlockComment()"
