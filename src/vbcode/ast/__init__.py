#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The tree is built by an external Markdown parser; this package only defines
its node types and the event-driven walker that feeds renderers.

- nodes: AST node classes representing document structure
- walk: enter/exit traversal driver and the ``WalkStatus`` directive

Examples
--------
    >>> from vbcode.ast import Document, Heading, Text
    >>> from vbcode.renderers.bbcode import BBCodeRenderer
    >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
    >>> BBCodeRenderer().render_to_string(doc)
    '[size=+4]Title[/size]\\n\\n'

"""

from __future__ import annotations

from vbcode.ast.nodes import (
    LEAF_NODES,
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
    SourceLocation,
    Strikethrough,
    Strong,
    Table,
    TableBody,
    TableCell,
    TableHead,
    TableRow,
    Text,
    ThematicBreak,
    get_node_children,
    is_container,
)
from vbcode.ast.walk import NodeVisitorFunc, WalkStatus, walk

__all__ = [
    # Nodes
    "Node",
    "SourceLocation",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableHead",
    "TableBody",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "HTMLBlock",
    "Text",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "Code",
    "Link",
    "Image",
    "LineBreak",
    "HTMLInline",
    # Node helpers
    "LEAF_NODES",
    "get_node_children",
    "is_container",
    # Traversal
    "NodeVisitorFunc",
    "WalkStatus",
    "walk",
]
