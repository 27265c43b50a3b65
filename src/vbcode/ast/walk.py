#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/ast/walk.py
"""Event-driven AST traversal.

The walker owns the traversal order; a visitor only reacts to the events it
receives. Every node produces an entering event. Container nodes (see
``is_container``) additionally produce an exiting event after all of their
children have been walked, so tags opened on enter and closed on exit nest in
the same order as the tree.

Examples
--------
Collect the kinds of all entered nodes:

    >>> from vbcode.ast import Document, Paragraph, Text
    >>> from vbcode.ast.walk import WalkStatus, walk
    >>> seen = []
    >>> def visitor(node, entering):
    ...     if entering:
    ...         seen.append(node.node_type)
    ...     return WalkStatus.GO_TO_NEXT
    >>> walk(Document(children=[Paragraph(content=[Text("hi")])]), visitor)
    <WalkStatus.GO_TO_NEXT: 'go_to_next'>
    >>> seen
    ['Document', 'Paragraph', 'Text']

"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, Optional

from vbcode.ast.nodes import Node, get_node_children, is_container


class WalkStatus(Enum):
    """Directive returned by a visitor to steer the walk."""

    GO_TO_NEXT = "go_to_next"
    SKIP_CHILDREN = "skip_children"
    TERMINATE = "terminate"


NodeVisitorFunc = Callable[[Node, bool], WalkStatus]


def walk(node: Node, visitor: NodeVisitorFunc) -> WalkStatus:
    """Walk a subtree depth-first, delivering enter/exit events to a visitor.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk
    visitor : callable
        Called as ``visitor(node, entering)`` for every event

    Returns
    -------
    WalkStatus
        ``TERMINATE`` if the visitor stopped the walk, else ``GO_TO_NEXT``

    Notes
    -----
    ``SKIP_CHILDREN`` returned on enter skips the node's children but the
    node still receives its exiting event.

    The walk keeps its own stack of open containers, so nesting depth is not
    limited by the interpreter's recursion limit.

    """
    stack: list[tuple[Node, Iterator[Node]]] = []
    pending: Optional[Node] = node

    while True:
        if pending is not None:
            status = visitor(pending, True)
            if status is WalkStatus.TERMINATE:
                return status
            if is_container(pending):
                child_nodes = [] if status is WalkStatus.SKIP_CHILDREN else get_node_children(pending)
                stack.append((pending, iter(child_nodes)))

        if not stack:
            return WalkStatus.GO_TO_NEXT

        current, children = stack[-1]
        pending = next(children, None)
        if pending is None:
            stack.pop()
            if visitor(current, False) is WalkStatus.TERMINATE:
                return WalkStatus.TERMINATE


__all__ = ["NodeVisitorFunc", "WalkStatus", "walk"]
