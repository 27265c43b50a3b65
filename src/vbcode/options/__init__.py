#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer option classes."""

from vbcode.options.base import BaseRendererOptions, CloneFrozenMixin
from vbcode.options.bbcode import BBCodeRendererOptions

__all__ = [
    "BaseRendererOptions",
    "BBCodeRendererOptions",
    "CloneFrozenMixin",
]
