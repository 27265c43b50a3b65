#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/options/base.py
"""Base classes for renderer options.

This module defines the foundation classes for the format-specific options
used by the vbcode renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen
    dataclass fields and validate them in ``__post_init__``, calling
    ``super().__post_init__()`` first.

    """

    def __post_init__(self) -> None:
        """Validate base renderer options (none are defined yet)."""
        pass
