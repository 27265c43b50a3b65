#  Copyright (c) 2025 Tom Villani, Ph.D.
"""vbcode - render Markdown document trees as vBulletin BBCode.

vbcode consumes a Markdown AST built by an external parser and serializes it
in a single pass into BBCode tags such as ``[b]``, ``[url=...]`` and
``[list]``. Tables are not supported: they are reported as diagnostics and
skipped.

Requirements
------------
- Python 3.10+

Examples
--------
    >>> from vbcode import to_bbcode
    >>> from vbcode.ast import Document, Heading, Paragraph, Strong, Text
    >>> doc = Document(children=[
    ...     Heading(level=2, content=[Text("News")]),
    ...     Paragraph(content=[Strong(content=[Text("Hello")])]),
    ... ])
    >>> print(to_bbcode(doc))
    [size=+3]News[/size]
    <BLANKLINE>
    [b]Hello[/b]
    <BLANKLINE>

"""

from vbcode.api import to_bbcode
from vbcode.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
    VBCodeError,
)
from vbcode.logging_utils import configure_logging
from vbcode.options import BBCodeRendererOptions
from vbcode.renderers import BBCodeRenderer, BBCodeVisitor, Diagnostic

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "to_bbcode",
    "configure_logging",
    "BBCodeRenderer",
    "BBCodeRendererOptions",
    "BBCodeVisitor",
    "Diagnostic",
    "VBCodeError",
    "ValidationError",
    "InvalidOptionsError",
    "RenderingError",
    "OutputWriteError",
]
