#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/vbcode/renderers/__init__.py
"""AST renderers for converting documents to markup.

- BaseRenderer: abstract renderer interface
- BBCodeRenderer: render to vBulletin BBCode
- BBCodeVisitor: the single-traversal visitor behind BBCodeRenderer, for
  hosts that drive ``vbcode.ast.walk`` themselves

Examples
--------
    >>> from vbcode.ast import Document, Paragraph, Text
    >>> from vbcode.renderers import BBCodeRenderer
    >>> BBCodeRenderer().render_to_string(Document(children=[Paragraph(content=[Text("hi")])]))
    'hi\\n'

"""

from vbcode.renderers.base import BaseRenderer
from vbcode.renderers.bbcode import BBCodeRenderer, BBCodeVisitor, Diagnostic, DiagnosticSink

__all__ = [
    "BaseRenderer",
    "BBCodeRenderer",
    "BBCodeVisitor",
    "Diagnostic",
    "DiagnosticSink",
]
