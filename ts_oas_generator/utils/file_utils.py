"""
File utilities for the OAS generator.

This module provides input reading and output writing for the TypeScript
OAS generator.
"""

import sys
from pathlib import Path
from typing import BinaryIO


def read_spec_file(path: Path) -> bytes:
    """Read a specification file as raw bytes.

    Args:
        path: Path to the JSON or YAML specification.

    Returns:
        The file content.
    """
    return Path(path).read_bytes()


def read_stdin(stream: BinaryIO | None = None) -> bytes:
    """Read a specification from standard input.

    Args:
        stream: Binary stream to read from; defaults to ``sys.stdin.buffer``.

    Returns:
        Everything read from the stream.
    """
    return (stream or sys.stdin.buffer).read()


def write_output(path: Path, content: str) -> None:
    """Write generated source to disk, replacing any existing file.

    Args:
        path: Destination file path.
        content: Generated TypeScript source.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
