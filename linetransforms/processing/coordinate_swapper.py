"""
Coordinate swapping for \\circle{(A,B)...} markup tokens.
"""

import re
from typing import Any, Dict, Iterable, Iterator, Optional

from ..utils.file_handler import strip_terminator
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_COMMAND = 'circle'

def build_pattern(command: str = DEFAULT_COMMAND) -> re.Pattern:
    """Compile the token pattern for a markup command name."""
    return re.compile(
        r'\\' + re.escape(command) + r'\{\(([0-9]+),([0-9]+)\)([^}]*)\}'
    )

CIRCLE_PATTERN = build_pattern()

class CoordinateSwapper:
    """Swaps the two numeric coordinates of every matching markup token."""
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.command = self.config.get('command', DEFAULT_COMMAND)
        if self.command == DEFAULT_COMMAND:
            self.pattern = CIRCLE_PATTERN
        else:
            self.pattern = build_pattern(self.command)
        
    def swap(self, line: str) -> str:
        """
        Rewrite every token on the line with its coordinates exchanged.
        
        Args:
            line: Line of text without its terminator
            
        Returns:
            Line with all matching tokens rewritten; other text untouched
        """
        return self.pattern.sub(self._replace, line)
    
    def count_matches(self, line: str) -> int:
        """Count the tokens on a line that would be rewritten."""
        return sum(1 for _ in self.pattern.finditer(line))
    
    def stream(self, lines: Iterable[str]) -> Iterator[str]:
        """
        Lazily swap coordinates line by line.
        
        Yields exactly one output line, without terminator, per input line.
        """
        for number, line in enumerate(lines, 1):
            line = strip_terminator(line)
            swapped = self.swap(line)
            if swapped != line:
                logger.debug(f"Line {number}: swapped {self.count_matches(line)} token(s)")
            yield swapped
    
    def _replace(self, match) -> str:
        first, second, rest = match.groups()
        return f"\\{self.command}{{({second},{first}){rest}}}"

def swap_coordinates(line: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Swap coordinates on one line with the given (or default) configuration."""
    return CoordinateSwapper(config).swap(line)
