#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers shared by the vbcode renderers."""

from vbcode.utils.io_utils import OutputTarget, describe_target, write_text

__all__ = ["OutputTarget", "describe_target", "write_text"]
