"""Test utilities for the vbcode test suite."""

import re

from vbcode.ast import Node, walk
from vbcode.options import BBCodeRendererOptions
from vbcode.renderers.bbcode import BBCodeVisitor

TAG_PATTERN = re.compile(r"\[(/?)([a-z*]+)(?:=[^\]]*)?\]")


def render_fragment(node: Node, options: BBCodeRendererOptions | None = None) -> str:
    """Walk any subtree with a fresh visitor and return its markup."""
    visitor = BBCodeVisitor(options)
    visitor.begin_document()
    walk(node, visitor.visit)
    return visitor.end_document()


def assert_tags_balanced(markup: str) -> None:
    """Assert every closing tag matches the most recently opened tag.

    ``[*]`` list markers have no closing tag and are ignored.
    """
    stack: list[str] = []
    for closing, name in TAG_PATTERN.findall(markup):
        if name == "*":
            continue
        if closing:
            assert stack, f"closing [/{name}] without an open tag in {markup!r}"
            assert stack.pop() == name, f"[/{name}] closes the wrong tag in {markup!r}"
        else:
            stack.append(name)
    assert not stack, f"unclosed tags {stack} in {markup!r}"
