"""
File handling utilities for the line transformers.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, TextIO, Union

import yaml

def read_file(file_path: Union[str, Path], encoding: str = 'utf-8') -> str:
    """
    Read content from a text file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        
    Returns:
        File content as string
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
        
    with open(file_path, 'r', encoding=encoding) as f:
        return f.read()

def read_yaml(file_path: Union[str, Path], encoding: str = 'utf-8') -> Dict[str, Any]:
    """
    Read content from a YAML file.
    
    Args:
        file_path: Path to the file
        encoding: File encoding
        
    Returns:
        Parsed YAML content (an empty dict for an empty file)
    """
    content = read_file(file_path, encoding)
    return yaml.safe_load(content) or {}

def strip_terminator(line: str) -> str:
    """Remove a single trailing '\\n', '\\r\\n' or '\\r' line terminator."""
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line

def read_first_line(file_path: Optional[Union[str, Path]] = None,
                    stream: Optional[TextIO] = None,
                    encoding: str = 'utf-8') -> str:
    """Read one line from a file or stream, without its line terminator."""
    if file_path is not None:
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        with open(file_path, 'r', encoding=encoding) as f:
            return strip_terminator(f.readline())
    stream = stream if stream is not None else sys.stdin
    return strip_terminator(stream.readline())

def iter_lines(file_path: Optional[Union[str, Path]] = None,
               stream: Optional[TextIO] = None,
               encoding: str = 'utf-8') -> Iterator[str]:
    """
    Lazily yield lines from a file or stream.
    
    Lines keep their terminators; nothing is buffered beyond the current line.
    """
    if file_path is not None:
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        with open(file_path, 'r', encoding=encoding) as f:
            yield from f
        return
    yield from (stream if stream is not None else sys.stdin)
