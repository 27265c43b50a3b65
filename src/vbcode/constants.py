#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the vbcode library.

Constants are organized by category:
1. Type Definitions - Literal types used by the options classes
2. Markup Vocabulary - BBCode tag names emitted by the renderer
3. Heading Sizes - Heading level to ``[size=...]`` parameter table
4. Renderer Defaults - Default values for renderer options
5. Diagnostics - Message templates for unsupported constructs
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

ListNewlineMode = Literal["both", "enter"]
HeadingOverflowMode = Literal["empty", "clamp"]
DiagnosticSeverity = Literal["warning", "info"]

# =============================================================================
# Markup Vocabulary
# =============================================================================

TAG_EMPHASIS = "highlight"
TAG_STRONG = "b"
TAG_STRIKETHROUGH = "strike"
TAG_QUOTE = "quote"
TAG_URL = "url"
TAG_IMAGE = "img"
TAG_CODE = "code"
TAG_SIZE = "size"
TAG_LIST = "list"
TAG_LIST_ITEM = "*"

ORDERED_LIST_PARAMETER = "1"

# =============================================================================
# Heading Sizes
# =============================================================================

HEADING_SIZES: Mapping[int, str] = MappingProxyType(
    {
        1: "+4",
        2: "+3",
        3: "+2",
        4: "+1",
        5: "+0",
        6: "-1",
        7: "-2",
    }
)
MAX_MAPPED_HEADING_LEVEL = max(HEADING_SIZES)

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_LIST_NEWLINE_MODE: ListNewlineMode = "both"
DEFAULT_HEADING_OVERFLOW: HeadingOverflowMode = "empty"

# =============================================================================
# Diagnostics
# =============================================================================

UNSUPPORTED_TABLE_MESSAGE = "Tables are not supported by vBulletin code. Skipping {construct}."
UNKNOWN_NODE_MESSAGE = "Unknown node type {node_type}"
UNMAPPED_HEADING_MESSAGE = "No size mapping for heading level {level}"
