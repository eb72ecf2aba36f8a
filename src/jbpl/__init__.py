"""
jbpl: syntax-highlighting lexer for the Java Bytecode Patch Language

Turns JBPL source into an ordered, gap-free stream of classified tokens.
Scanning never fails: text no rule recognizes becomes single-character
Error tokens, and unterminated strings or comments simply run to the end.

Quick Start:
    >>> from jbpl import lex
    >>> [t.kind.qualname for t in lex("iconst_1")]
    ['Operator.Word']

    >>> # Raw per-rule tokens and stack introspection
    >>> from jbpl import Lexer
    >>> lexer = Lexer('"a${b')
    >>> tokens = list(lexer.tokenize())
    >>> lexer.depth
    2

Installation:
    pip install jbpl-lexer              # Core lexer (zero deps)
    pip install jbpl-lexer[test]        # + pytest and hypothesis
"""

from jbpl.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from jbpl.errors import GrammarError, JbplError
from jbpl.info import LEXER_INFO, LexerInfo
from jbpl.lexer import RULES, Lexer, LexerState
from jbpl.tokens import Token, TokenKind

__version__ = "0.1.0"


def lex(source: str, *, config: LexConfig | None = None) -> list[Token]:
    """Tokenize JBPL source.

    Args:
        source: Complete source text of one file
        config: Configuration to use instead of the active context config

    Returns:
        Tokens in source order; their values concatenate to ``source``.
    """
    return list(Lexer(source, config=config).lex())


__all__ = [
    "__version__",
    # Lexing
    "lex",
    "Lexer",
    "LexerState",
    "RULES",
    "Token",
    "TokenKind",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Registration
    "LEXER_INFO",
    "LexerInfo",
    # Errors
    "JbplError",
    "GrammarError",
]
