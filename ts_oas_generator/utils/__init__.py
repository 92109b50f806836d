"""
Utilities Module for TypeScript Type Generation

This module provides input loading (file, stdin, HTTP) and output writing.
"""

from .fetch import create_session, fetch_spec
from .file_utils import read_spec_file, read_stdin, write_output

__all__ = [
    "create_session",
    "fetch_spec",
    "read_spec_file",
    "read_stdin",
    "write_output",
]
