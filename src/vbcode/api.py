#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/api.py
"""High-level rendering entry point."""

from __future__ import annotations

from typing import Optional

from vbcode.ast import Document
from vbcode.options.bbcode import BBCodeRendererOptions
from vbcode.renderers.bbcode import BBCodeRenderer, DiagnosticSink
from vbcode.utils.io_utils import OutputTarget


def to_bbcode(
    doc: Document,
    output: OutputTarget | None = None,
    *,
    options: Optional[BBCodeRendererOptions] = None,
    on_diagnostic: Optional[DiagnosticSink] = None,
) -> Optional[str]:
    """Render an AST document to BBCode.

    Parameters
    ----------
    doc : Document
        AST Document node to render
    output : str, Path, IO[bytes], IO[str], or None, optional
        Output destination. If None, returns the rendered markup.
    options : BBCodeRendererOptions, optional
        Renderer options
    on_diagnostic : callable, optional
        Receives every diagnostic raised for unsupported constructs

    Returns
    -------
    str or None
        The markup if ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If ``output`` was given and could not be written

    Examples
    --------
        >>> from vbcode.ast import Document, Paragraph, Link, Text
        >>> doc = Document(children=[Paragraph(content=[Link(url="http://e.com", content=[Text("t")])])])
        >>> to_bbcode(doc)
        '[url=http://e.com]t[/url]\\n'

    """
    renderer = BBCodeRenderer(options, on_diagnostic=on_diagnostic)
    if output is None:
        return renderer.render_to_string(doc)
    renderer.render(doc, output)
    return None
