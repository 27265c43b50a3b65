#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/renderers/bbcode.py
"""BBCode rendering from AST.

This module provides the BBCodeVisitor, a single-traversal visitor that turns
``(node, entering)`` walk events into vBulletin BBCode, and the BBCodeRenderer
facade that drives a fresh visitor for every document it renders.

Markup produced per node kind:

- Emphasis, Strong, Strikethrough, BlockQuote: ``[highlight]``, ``[b]``,
  ``[strike]``, ``[quote]`` pairs
- Link and Image: ``[url=DEST]...[/url]`` and ``[img=DEST]...[/img]``
- Heading: ``[size=S]...[/size]`` followed by a blank line
- Code and CodeBlock: ``[code]...[/code]`` (blocks wrapped in newlines)
- List and ListItem: ``[list]``/``[list=1]`` with ``[*]`` item markers
- Tables are not supported and only produce a diagnostic

The conversion is lossy: definition lists render as plain ``[list]`` and raw
HTML is dropped, so BBCode cannot be turned back into the original tree.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from vbcode.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
)
from vbcode.ast.walk import WalkStatus, walk
from vbcode.constants import (
    HEADING_SIZES,
    MAX_MAPPED_HEADING_LEVEL,
    ORDERED_LIST_PARAMETER,
    TAG_CODE,
    TAG_EMPHASIS,
    TAG_IMAGE,
    TAG_LIST,
    TAG_LIST_ITEM,
    TAG_QUOTE,
    TAG_SIZE,
    TAG_STRIKETHROUGH,
    TAG_STRONG,
    TAG_URL,
    UNKNOWN_NODE_MESSAGE,
    UNMAPPED_HEADING_MESSAGE,
    UNSUPPORTED_TABLE_MESSAGE,
    DiagnosticSeverity,
)
from vbcode.exceptions import RenderingError
from vbcode.options.bbcode import BBCodeRendererOptions
from vbcode.renderers.base import BaseRenderer
from vbcode.utils.io_utils import OutputTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while rendering.

    Parameters
    ----------
    node_type : str
        Kind of the node that triggered the diagnostic
    message : str
        Human-readable description
    severity : {"warning", "info"}, default "warning"
        Diagnostic severity

    """

    node_type: str
    message: str
    severity: DiagnosticSeverity = "warning"


DiagnosticSink = Callable[[Diagnostic], None]
NodeHandler = Callable[[Any], None]

_TABLE_CONSTRUCTS: dict[type[Node], str] = {
    Table: "table",
    TableHead: "table-head",
    TableBody: "table-body",
    TableRow: "table-row",
    TableCell: "table-cell",
}


class BBCodeVisitor:
    """Stateful visitor turning walk events into BBCode.

    One instance serves exactly one traversal: its output buffer starts empty,
    only grows, and is released by ``end_document``. Create a new instance
    for every document (``BBCodeRenderer`` does this for you).

    Parameters
    ----------
    options : BBCodeRendererOptions or None, default = None
        Rendering options
    on_diagnostic : callable or None, default = None
        Called with every ``Diagnostic`` as it is raised

    Examples
    --------
        >>> from vbcode.ast import Document, Paragraph, Strong, Text, walk
        >>> visitor = BBCodeVisitor()
        >>> doc = Document(children=[Paragraph(content=[Strong(content=[Text("hi")])])])
        >>> visitor.begin_document()
        >>> walk(doc, visitor.visit)
        <WalkStatus.GO_TO_NEXT: 'go_to_next'>
        >>> visitor.end_document()
        '[b]hi[/b]\\n'

    """

    def __init__(self, options: BBCodeRendererOptions | None = None, on_diagnostic: Optional[DiagnosticSink] = None):
        self.options = options or BBCodeRendererOptions()
        self.diagnostics: list[Diagnostic] = []
        self._on_diagnostic = on_diagnostic
        self._buffer: list[str] = []
        self._size = 0
        self._finished = False
        self._handlers: dict[type[Node], tuple[Optional[NodeHandler], Optional[NodeHandler]]] = {
            Document: (None, None),
            Text: (self._enter_text, None),
            LineBreak: (self._enter_line_break, None),
            Emphasis: self._toggle(TAG_EMPHASIS),
            Strong: self._toggle(TAG_STRONG),
            Strikethrough: self._toggle(TAG_STRIKETHROUGH),
            BlockQuote: self._toggle(TAG_QUOTE),
            HTMLInline: (None, None),
            HTMLBlock: (None, None),
            Link: self._toggle_with_destination(TAG_URL),
            Image: self._toggle_with_destination(TAG_IMAGE),
            Code: (self._enter_code, None),
            CodeBlock: (self._enter_code_block, None),
            Paragraph: (None, self._exit_paragraph),
            Heading: (self._enter_heading, self._exit_heading),
            ThematicBreak: (self._enter_thematic_break, None),
            List: (self._enter_list, self._exit_list),
            ListItem: (self._enter_list_item, None),
        }
        for table_type in _TABLE_CONSTRUCTS:
            self._handlers[table_type] = (self._skip_table, self._skip_table)

    @property
    def handled_types(self) -> frozenset[type[Node]]:
        """Node classes with an entry in the dispatch table."""
        return frozenset(self._handlers)

    # ------------------------------------------------------------------
    # Visitor contract
    # ------------------------------------------------------------------

    def begin_document(self, output: OutputTarget | None = None) -> None:
        """Start a document. Emits nothing; the buffer is already empty."""
        logger.debug("Beginning BBCode document")

    def visit(self, node: Node, entering: bool) -> WalkStatus:
        """Append the markup for one walk event.

        Parameters
        ----------
        node : Node
            Node being visited
        entering : bool
            True on the entering visit, False on the exiting visit

        Returns
        -------
        WalkStatus
            Always ``WalkStatus.GO_TO_NEXT``

        Raises
        ------
        RenderingError
            If called after ``end_document``

        """
        if self._finished:
            raise RenderingError(
                "BBCodeVisitor already finished its document; create a new visitor per traversal",
                rendering_stage="visit",
            )

        handlers = self._resolve_handlers(node)
        if handlers is None:
            if entering:
                self._report(node.node_type, UNKNOWN_NODE_MESSAGE.format(node_type=node.node_type))
            return WalkStatus.GO_TO_NEXT

        handler = handlers[0] if entering else handlers[1]
        if handler is not None:
            handler(node)
        return WalkStatus.GO_TO_NEXT

    def _resolve_handlers(self, node: Node) -> tuple[Optional[NodeHandler], Optional[NodeHandler]] | None:
        """Return the handlers of the node's class or of its nearest handled base class."""
        for node_class in type(node).__mro__:
            handlers = self._handlers.get(node_class)
            if handlers is not None:
                return handlers
        return None

    def end_document(self, output: OutputTarget | None = None) -> str:
        """Finish the document and release the rendered markup.

        Parameters
        ----------
        output : str, Path, IO[bytes], IO[str], or None
            Sink receiving the markup. When None the markup is only returned.

        Returns
        -------
        str
            The complete rendered document

        Raises
        ------
        OutputWriteError
            If the sink rejects the write. Nothing is retried.

        """
        self._finished = True
        text = "".join(self._buffer)
        if output is not None:
            BaseRenderer.write_text_output(text, output)
        logger.debug("Finished BBCode document (%d characters)", len(text))
        return text

    # ------------------------------------------------------------------
    # Node handlers
    # ------------------------------------------------------------------

    def _toggle(self, tag: str) -> tuple[NodeHandler, NodeHandler]:
        return (lambda node: self._start_tag(tag), lambda node: self._end_tag(tag))

    def _toggle_with_destination(self, tag: str) -> tuple[NodeHandler, NodeHandler]:
        return (
            lambda node: self._start_tag_with_parameter(tag, node.url),
            lambda node: self._end_tag(tag),
        )

    def _enter_text(self, node: Text) -> None:
        self._literal(node.content)

    def _enter_line_break(self, node: LineBreak) -> None:
        # soft and hard breaks are both a plain newline in BBCode
        self._line_break()

    def _enter_code(self, node: Code) -> None:
        self._start_tag(TAG_CODE)
        self._literal(node.content)
        self._end_tag(TAG_CODE)

    def _enter_code_block(self, node: CodeBlock) -> None:
        self._line_break()
        self._start_tag(TAG_CODE)
        self._literal(node.content)
        self._end_tag(TAG_CODE)
        self._line_break()

    def _exit_paragraph(self, node: Paragraph) -> None:
        self._line_break()

    def _enter_heading(self, node: Heading) -> None:
        if self._size > 0:
            self._line_break()
        self._start_tag_with_parameter(TAG_SIZE, self._heading_size(node))

    def _exit_heading(self, node: Heading) -> None:
        self._end_tag(TAG_SIZE)
        self._line_break()
        self._line_break()

    def _heading_size(self, node: Heading) -> str:
        """Look up the size parameter for a heading level.

        Levels without a mapping raise a diagnostic and resolve according to
        ``options.heading_overflow``.
        """
        size = HEADING_SIZES.get(node.level)
        if size is not None:
            return size

        self._report(node.node_type, UNMAPPED_HEADING_MESSAGE.format(level=node.level))
        if self.options.heading_overflow == "clamp":
            return HEADING_SIZES[MAX_MAPPED_HEADING_LEVEL]
        return ""

    def _enter_thematic_break(self, node: ThematicBreak) -> None:
        self._line_break()
        self._line_break()

    def _enter_list(self, node: List) -> None:
        if self._size > 0:
            self._line_break()
        # definition lists have no BBCode counterpart and render as [list]
        if node.ordered:
            self._start_tag_with_parameter(TAG_LIST, ORDERED_LIST_PARAMETER)
        else:
            self._start_tag(TAG_LIST)
        self._line_break()

    def _exit_list(self, node: List) -> None:
        self._end_tag(TAG_LIST)
        if self.options.list_newline_mode == "both":
            self._line_break()

    def _enter_list_item(self, node: ListItem) -> None:
        self._start_tag(TAG_LIST_ITEM)

    def _skip_table(self, node: Node) -> None:
        construct = next(_TABLE_CONSTRUCTS[cls] for cls in type(node).__mro__ if cls in _TABLE_CONSTRUCTS)
        self._report(node.node_type, UNSUPPORTED_TABLE_MESSAGE.format(construct=construct))

    # ------------------------------------------------------------------
    # Emission helpers
    # ------------------------------------------------------------------

    def _write(self, text: str) -> None:
        self._buffer.append(text)
        self._size += len(text)

    def _line_break(self) -> None:
        self._write("\n")

    def _literal(self, text: str) -> None:
        self._write(text)

    def _start_tag(self, tag: str) -> None:
        self._write(f"[{tag}]")

    def _start_tag_with_parameter(self, tag: str, parameter: str) -> None:
        self._write(f"[{tag}={parameter}]")

    def _end_tag(self, tag: str) -> None:
        self._write(f"[/{tag}]")

    def _report(self, node_type: str, message: str) -> None:
        diagnostic = Diagnostic(node_type=node_type, message=message)
        self.diagnostics.append(diagnostic)
        logger.warning(message)
        if self._on_diagnostic is not None:
            self._on_diagnostic(diagnostic)


class BBCodeRenderer(BaseRenderer):
    """Render AST documents to vBulletin BBCode.

    Each call to ``render`` or ``render_to_string`` walks the document with a
    fresh ``BBCodeVisitor``, so a renderer can be reused for many documents.

    Parameters
    ----------
    options : BBCodeRendererOptions or None, default = None
        BBCode rendering options
    on_diagnostic : callable or None, default = None
        Called with every ``Diagnostic`` raised while rendering

    Attributes
    ----------
    diagnostics : list of Diagnostic
        Diagnostics raised by the most recent render call

    Examples
    --------
    Basic usage:

        >>> from vbcode.ast import Document, Heading, Text
        >>> from vbcode.renderers.bbcode import BBCodeRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> print(BBCodeRenderer().render_to_string(doc))
        [size=+4]Title[/size]
        <BLANKLINE>

    """

    def __init__(self, options: BBCodeRendererOptions | None = None, on_diagnostic: Optional[DiagnosticSink] = None):
        """Initialize the BBCode renderer with options."""
        BaseRenderer._validate_options_type(options, BBCodeRendererOptions, "bbcode")
        options = options or BBCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: BBCodeRendererOptions = options
        self.on_diagnostic = on_diagnostic
        self.diagnostics: list[Diagnostic] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a BBCode string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            BBCode markup text

        """
        visitor = BBCodeVisitor(self.options, on_diagnostic=self.on_diagnostic)
        self.diagnostics = visitor.diagnostics
        visitor.begin_document()
        walk(doc, visitor.visit)
        return visitor.end_document()


__all__ = [
    "BBCodeRenderer",
    "BBCodeVisitor",
    "Diagnostic",
    "DiagnosticSink",
]
