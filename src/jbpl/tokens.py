"""Token and TokenKind definitions for the JBPL lexer.

The lexer produces a stream of Token objects that a highlighter consumes.
Each Token has a kind, the exact lexeme and its span in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed taxonomy of token kinds.

    Values are dotted qualified names in the Pygments convention so a
    host can map them straight onto an existing color theme. A kind is a
    subtype of every kind whose qualified name is a dotted prefix of its own
    (``Name.Variable.Instance`` is a ``Name.Variable`` is a ``Name``).

    """

    TEXT = "Text"
    ERROR = "Error"

    KEYWORD = "Keyword"
    KEYWORD_TYPE = "Keyword.Type"
    KEYWORD_CONSTANT = "Keyword.Constant"

    OPERATOR_WORD = "Operator.Word"  # instruction mnemonics

    NAME = "Name"
    NAME_CLASS = "Name.Class"
    NAME_FUNCTION = "Name.Function"
    NAME_VARIABLE = "Name.Variable"
    NAME_VARIABLE_INSTANCE = "Name.Variable.Instance"

    STRING = "Literal.String"
    STRING_DOUBLE = "Literal.String.Double"
    STRING_INTERPOL = "Literal.String.Interpol"
    STRING_CHAR = "Literal.String.Char"

    NUMBER = "Literal.Number"
    NUMBER_BIN = "Literal.Number.Bin"
    NUMBER_HEX = "Literal.Number.Hex"
    NUMBER_OCT = "Literal.Number.Oct"
    NUMBER_FLOAT = "Literal.Number.Float"
    NUMBER_INTEGER = "Literal.Number.Integer"

    COMMENT = "Comment"
    COMMENT_SINGLE = "Comment.Single"
    COMMENT_MULTILINE = "Comment.Multiline"

    PUNCTUATION = "Punctuation"

    @property
    def qualname(self) -> str:
        """Dotted qualified name, e.g. ``"Literal.Number.Hex"``."""
        return self.value

    @property
    def parent(self) -> TokenKind | None:
        """The next-more-general kind, or None for top-level kinds."""
        head, sep, _ = self.value.rpartition(".")
        if not sep:
            return None
        try:
            return TokenKind(head)
        except ValueError:
            # "Literal" itself is not part of the taxonomy
            return None

    def is_subtype_of(self, other: TokenKind) -> bool:
        """True if this kind equals ``other`` or specializes it."""
        return self.value == other.value or self.value.startswith(other.value + ".")

    @property
    def css_class(self) -> str:
        """Short CSS class conventionally used for this kind by HTML formatters."""
        return _CSS_CLASSES[self]


_CSS_CLASSES: dict[TokenKind, str] = {
    TokenKind.TEXT: "",
    TokenKind.ERROR: "err",
    TokenKind.KEYWORD: "k",
    TokenKind.KEYWORD_TYPE: "kt",
    TokenKind.KEYWORD_CONSTANT: "kc",
    TokenKind.OPERATOR_WORD: "ow",
    TokenKind.NAME: "n",
    TokenKind.NAME_CLASS: "nc",
    TokenKind.NAME_FUNCTION: "nf",
    TokenKind.NAME_VARIABLE: "nv",
    TokenKind.NAME_VARIABLE_INSTANCE: "vi",
    TokenKind.STRING: "s",
    TokenKind.STRING_DOUBLE: "s2",
    TokenKind.STRING_INTERPOL: "si",
    TokenKind.STRING_CHAR: "sc",
    TokenKind.NUMBER: "m",
    TokenKind.NUMBER_BIN: "mb",
    TokenKind.NUMBER_HEX: "mh",
    TokenKind.NUMBER_OCT: "mo",
    TokenKind.NUMBER_FLOAT: "mf",
    TokenKind.NUMBER_INTEGER: "mi",
    TokenKind.COMMENT: "c",
    TokenKind.COMMENT_SINGLE: "c1",
    TokenKind.COMMENT_MULTILINE: "cm",
    TokenKind.PUNCTUATION: "p",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        kind: The token kind (from TokenKind enum)
        value: The exact lexeme, always ``source[start:end]``
        start: Absolute start offset in source
        end: Absolute end offset in source (exclusive)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    kind: TokenKind
    value: str
    start: int
    end: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) offsets (convenience accessor)."""
        return self.start, self.end
