#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy for Markdown documents handed to the
BBCode renderer by an external parser. Each node represents a structural or
inline element in the document.

Node Hierarchy
--------------
All nodes inherit from the base Node class.

Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, BlockQuote
    - List, ListItem, ThematicBreak, HTMLBlock
    - Table, TableHead, TableBody, TableRow, TableCell

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak, HTMLInline

Leaf nodes (see ``LEAF_NODES``) carry a literal payload and are visited once
during a walk; every other node is a container visited on enter and on exit.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    format : str
        Source format (e.g., 'markdown')
    line : int or None, default = None
        Line number in source document
    column : int or None, default = None
        Column number in source document
    metadata : dict, default = empty dict
        Additional format-specific location information

    """

    format: str
    line: Optional[int] = None
    column: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)


class Node:
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node
    source_location : SourceLocation or None, default = None
        Information about where this node came from in the source

    """

    metadata: dict[str, Any]
    source_location: Optional[SourceLocation]

    @property
    def node_type(self) -> str:
        """Return the kind name of this node (its class name)."""
        return type(self).__name__


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Heading(Node):
    """Heading node.

    Markdown parsers produce levels 1-6, but setext/extension syntaxes may
    produce deeper levels, so no upper bound is enforced here.

    Parameters
    ----------
    level : int
        Heading level (1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level is positive."""
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class CodeBlock(Node):
    """Code block node with optional language specification.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown)
    language : str or None, default = None
        Info string language, if any
    metadata : dict, default = empty dict
        Code block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the quote
    metadata : dict, default = empty dict
        Block quote metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class List(Node):
    """List node (ordered, unordered or definition).

    Parameters
    ----------
    ordered : bool, default = False
        True for ordered (numbered) lists
    items : list of ListItem, default = empty list
        List items
    definition : bool, default = False
        True for definition lists (term/description pairs)
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata
    source_location : SourceLocation or None, default = None
        Source location information

    Notes
    -----
    A list with neither ``ordered`` nor ``definition`` set is unordered.

    """

    ordered: bool = False
    items: list[ListItem] = field(default_factory=list)
    definition: bool = False
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    metadata : dict, default = empty dict
        List item metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Table(Node):
    """Table node (GFM extension).

    Parameters
    ----------
    head : TableHead or None, default = None
        Header section
    body : TableBody or None, default = None
        Body section
    metadata : dict, default = empty dict
        Table metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    head: Optional[TableHead] = None
    body: Optional[TableBody] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableHead(Node):
    """Header section of a table."""

    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableBody(Node):
    """Body section of a table."""

    rows: list[TableRow] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class TableCell(Node):
    """Table cell node containing inline content."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Parameters
    ----------
    content : str
        Raw HTML content
    metadata : dict, default = empty dict
        HTML block metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Code(Node):
    """Inline code node.

    Parameters
    ----------
    content : str
        Code content
    metadata : dict, default = empty dict
        Code metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class Image(Node):
    """Image node.

    Markdown image syntax carries its alternative text as inline content, so
    an Image is a container like Link.

    Parameters
    ----------
    url : str
        Image source URL
    content : list of Node, default = empty list
        Inline nodes representing the alternative text
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class LineBreak(Node):
    """Line break node.

    Parameters
    ----------
    soft : bool, default = False
        True for soft breaks (newline in source), False for hard breaks
    metadata : dict, default = empty dict
        Line break metadata
    source_location : SourceLocation or None, default = None
        Source location information

    """

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


@dataclass
class HTMLInline(Node):
    """Inline raw HTML node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    source_location: Optional[SourceLocation] = None


LEAF_NODES: frozenset[type[Node]] = frozenset(
    {
        Text,
        Code,
        CodeBlock,
        LineBreak,
        ThematicBreak,
        HTMLInline,
        HTMLBlock,
    }
)


def is_container(node: Node) -> bool:
    """Return True if the node is visited on both enter and exit.

    Parameters
    ----------
    node : Node
        The node to classify

    Returns
    -------
    bool
        False for leaf kinds in ``LEAF_NODES`` and their subclasses, True for
        everything else (including node classes unknown to this module)

    """
    return not isinstance(node, tuple(LEAF_NODES))


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node, in document order.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    # Block nodes with 'children' attribute
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)

    # Nodes with inline 'content'
    if isinstance(
        node,
        (
            Heading,
            Paragraph,
            Emphasis,
            Strong,
            Strikethrough,
            Link,
            Image,
            TableCell,
        ),
    ):
        return list(node.content)

    if isinstance(node, List):
        return list(node.items)

    # Table has head and body sections
    if isinstance(node, Table):
        sections: list[Node] = []
        if node.head is not None:
            sections.append(node.head)
        if node.body is not None:
            sections.append(node.body)
        return sections

    if isinstance(node, (TableHead, TableBody)):
        return list(node.rows)

    if isinstance(node, TableRow):
        return list(node.cells)

    # Nodes from outside this module may still expose a children list
    children = getattr(node, "children", None)
    if isinstance(children, list):
        return list(children)

    # Leaf nodes (no children)
    return []
