"""Tests for jbpl.utils."""

from jbpl.utils import get_logger


class TestGetLogger:
    def test_adds_prefix(self) -> None:
        assert get_logger("mymodule").name == "jbpl.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("jbpl.lexer.core").name == "jbpl.lexer.core"
        assert get_logger("jbpl").name == "jbpl"

    def test_does_not_match_lookalike_prefix(self) -> None:
        assert get_logger("jbplx").name == "jbpl.jbplx"
