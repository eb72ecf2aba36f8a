"""Tokenize a JBPL patch and print every token."""

from jbpl import lex

source = 'inject <com/example/Main> .main(<java/lang/String>[]) -> void { ldc "hi" }'

for token in lex(source):
    print(f"{token.kind.qualname:<24} {token.value!r}")
