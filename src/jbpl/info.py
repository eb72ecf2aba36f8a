"""Registration metadata for host highlighting frameworks.

The host owns filename and mimetype dispatch; this module only publishes
the stable identifiers it needs.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerInfo:
    """Identifiers a host uses to register and select the lexer.

    Attributes:
        tag: Stable short name
        title: Human-readable name
        description: One-line description
        aliases: Alternative names accepted for ``tag``
        filenames: Glob patterns of source files
        mimetypes: Media types of source text

    """

    tag: str
    title: str
    description: str
    aliases: tuple[str, ...] = ()
    filenames: tuple[str, ...] = ()
    mimetypes: tuple[str, ...] = ()


LEXER_INFO = LexerInfo(
    tag="jbpl",
    title="JBPL",
    description="Java Bytecode Patch Language (https://github.com/karmakrafts/JBPL)",
    filenames=("*.jbpl",),
    mimetypes=("text/x-jbpl",),
)
