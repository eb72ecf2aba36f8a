"""Render tokens as HTML spans using each kind's conventional CSS class."""

from html import escape

from jbpl import lex

source = '/* entry */\nfield <Foo> count: i32 = 0x1Fi32\n'

parts = []
for token in lex(source):
    text = escape(token.value)
    css = token.kind.css_class
    parts.append(f'<span class="{css}">{text}</span>' if css else text)

print(f'<pre class="highlight">{"".join(parts)}</pre>')
