#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/vbcode/utils/io_utils.py
"""I/O utilities for handling output destinations.

Rendered markup is text; this module writes it to whatever sink the caller
supplies (a path, a text stream or a binary stream).

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes."""
    # Concrete types first
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    # io base classes cover the standard streams
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(content: str, output: OutputTarget, encoding: str = "utf-8") -> None:
    """Write text content to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Binary streams receive ``content`` encoded
        with ``encoding``.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    TypeError
        If output type is not supported
    OSError
        If the destination rejects the write

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("[b]x[/b]", buffer)
        >>> buffer.getvalue()
        b'[b]x[/b]'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding=encoding)
        return

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode(encoding))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


def describe_target(output: object) -> str:
    """Return a short human-readable name for an output destination."""
    if isinstance(output, (str, Path)):
        return str(output)
    name = getattr(output, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(output).__name__}>"


__all__ = ["OutputTarget", "describe_target", "write_text"]
