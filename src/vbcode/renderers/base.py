#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from.
The BaseRenderer provides a consistent interface for converting the vbcode
AST into markup text.

"""

from __future__ import annotations

from abc import ABC, abstractmethod

from vbcode.ast import Document
from vbcode.exceptions import InvalidOptionsError, OutputWriteError
from vbcode.options.base import BaseRendererOptions
from vbcode.utils.io_utils import OutputTarget, describe_target, write_text


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from vbcode.renderers.base import BaseRenderer
        >>>
        >>> class MyCustomRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the AST and write it to the specified output.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: OutputTarget) -> None:
        """Write text output to file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text to write
        output : str, Path, IO[bytes], or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the destination rejects the write or is not a supported sink.
            The original exception is chained and kept in ``original_error``.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("[b]Hello[/b]", buffer)
            >>> buffer.getvalue()
            '[b]Hello[/b]'

        """
        try:
            write_text(text, output)
        except (OSError, TypeError, ValueError) as e:
            raise OutputWriteError(describe_target(output), original_error=e) from e
