"""Exception classes for jbpl.

Scanning itself never raises: malformed input is represented by Error
tokens in the stream. These exceptions cover mistakes in the grammar
tables, which are programming errors caught when the tables are built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jbpl.lexer.modes import LexerState


class JbplError(Exception):
    """Base exception for all jbpl errors.
    
    Subclass this for specific error categories.
    """

    pass


class GrammarError(JbplError):
    """Error in a lexer rule table.

    Raised while flattening rule tables when an include or a stack
    transition names a state with no rule list, or when includes form a
    cycle.
    """

    def __init__(self, state: LexerState, message: str) -> None:
        """Initialize grammar error.

        Args:
            state: State whose rule list is invalid
            message: Description of the problem
        """
        self.state = state
        super().__init__(f"State '{state.value}': {message}")
