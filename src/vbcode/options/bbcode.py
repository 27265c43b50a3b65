#  Copyright (c) 2025 Tom Villani, Ph.D.

# vbcode/options/bbcode.py
"""Configuration options for BBCode rendering.

This module defines the options class for rendering the AST to the
vBulletin flavour of BBCode.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from vbcode.constants import (
    DEFAULT_HEADING_OVERFLOW,
    DEFAULT_LIST_NEWLINE_MODE,
    HeadingOverflowMode,
    ListNewlineMode,
)
from vbcode.options.base import BaseRendererOptions


@dataclass(frozen=True)
class BBCodeRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-BBCode rendering.

    Parameters
    ----------
    list_newline_mode : {"both", "enter"}, default "both"
        When the newline following a list tag is emitted:
        - "both": after ``[list]`` on enter and after ``[/list]`` on exit
        - "enter": only after the opening ``[list]``/``[list=1]`` tag
    heading_overflow : {"empty", "clamp"}, default "empty"
        Size parameter for heading levels beyond the size table (8 and up):
        - "empty": emit ``[size=]`` with no parameter
        - "clamp": reuse the size of the deepest mapped level (``-2``)
        Either way a diagnostic is raised for the unmapped level.

    Examples
    --------
    Basic usage:
        >>> from vbcode.renderers.bbcode import BBCodeRenderer
        >>> from vbcode.options.bbcode import BBCodeRendererOptions
        >>> renderer = BBCodeRenderer(BBCodeRendererOptions(list_newline_mode="enter"))

    """

    list_newline_mode: ListNewlineMode = field(
        default=DEFAULT_LIST_NEWLINE_MODE,
        metadata={
            "help": "Emit the newline after list tags on enter and exit, or on enter only",
            "choices": ["both", "enter"],
            "importance": "advanced",
        },
    )
    heading_overflow: HeadingOverflowMode = field(
        default=DEFAULT_HEADING_OVERFLOW,
        metadata={
            "help": "Size parameter for heading levels without a size mapping: empty or clamp",
            "choices": ["empty", "clamp"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If a literal option holds a value outside its choices.

        """
        super().__post_init__()
        if self.list_newline_mode not in get_args(ListNewlineMode):
            raise ValueError(
                f"list_newline_mode must be one of {get_args(ListNewlineMode)}, got {self.list_newline_mode!r}"
            )
        if self.heading_overflow not in get_args(HeadingOverflowMode):
            raise ValueError(
                f"heading_overflow must be one of {get_args(HeadingOverflowMode)}, got {self.heading_overflow!r}"
            )
