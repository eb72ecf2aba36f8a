"""Lexer states.

This module defines the states of the lexer's finite state machine. The
lexer keeps an explicit stack of them; the state on top selects which rule
list is tried at the cursor.
"""

from __future__ import annotations

from enum import Enum


class LexerState(Enum):
    """Lexer states.

    - ROOT: Bottom of every stack; same rules as BODY, never popped
    - BODY: General grammar; pushed by ``(``, ``[`` and ``{``
    - LITERAL: Numeric, string and char literals (mix-in only, never pushed)
    - STRING: Inside a double-quoted string
    - STRING_LERP: Inside ``${ ... }`` within a string
    - LERP: Inside ``${ ... }`` outside a string
    - SELECTION: After ``by``, expects one function name
    - PREPRO_CLASS: After ``^class``, expects one class name
    - MACRO: After ``macro``, expects the macro name
    - MACRO_CALL: Arguments of a macro invoked on ``>.`` or ``}.``
    - DEFINE: After ``define``, expects the bound name
    - FIELD: After ``field``, optional class type then field name
    - FUNCTION: After ``fun``/``inject``, optional class type then ``.name``
    - COMMENT: Inside a multi-line, possibly nested, block comment

    """

    ROOT = "root"
    BODY = "body"
    LITERAL = "literal"
    STRING = "string"
    STRING_LERP = "string_lerp"
    LERP = "lerp"
    SELECTION = "selection"
    PREPRO_CLASS = "prepro_class"
    MACRO = "macro"
    MACRO_CALL = "macro_call"
    DEFINE = "define"
    FIELD = "field"
    FUNCTION = "function"
    COMMENT = "comment"
