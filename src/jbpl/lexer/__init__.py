"""Table-driven state-machine lexer for JBPL.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerState, RULES
├── core.py              # Lexer class (scan loop, emission, stack transitions)
├── modes.py             # LexerState enum
├── patterns.py          # Keyword/mnemonic sets, literal grammars, matchers
├── rules.py             # Rule, Include, Push/Pop/Replace, table flattening
└── grammar.py           # Per-state rule lists, flattened into RULES

Usage:
    >>> from jbpl.lexer import Lexer
    >>> for token in Lexer("iload 0").lex():
    ...     print(token)
Token(OPERATOR_WORD, 'iload', 0:5)
Token(TEXT, ' ', 5:6)
Token(NUMBER_INTEGER, '0', 6:7)

"""

from jbpl.lexer.core import Lexer
from jbpl.lexer.grammar import RULES
from jbpl.lexer.modes import LexerState

__all__ = ["Lexer", "LexerState", "RULES"]
