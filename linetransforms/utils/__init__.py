"""
Line Transforms - Utilities Module

This module provides logging and file handling helpers used by
both transformers and the command-line interface.
"""

from .logger import get_logger, enable_debug_logging
from .file_handler import read_file, read_yaml, read_first_line, iter_lines, strip_terminator

__all__ = ['get_logger', 'enable_debug_logging', 'read_file', 'read_yaml',
           'read_first_line', 'iter_lines', 'strip_terminator']
