"""
Main entry point for the line transformers.
"""

import sys

from .cli import respell_command, swap_command
from .utils.logger import get_logger

logger = get_logger(__name__)

COMMANDS = {
    "respell": respell_command,
    "swap-coords": swap_command,
}

USAGE = "usage: line-transforms {respell,swap-coords} [-i FILE] [--config FILE] [--debug]"

def main():
    """Route to appropriate subcommand."""
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(USAGE)
        return 0 if len(sys.argv) >= 2 else 1
    
    command = COMMANDS.get(sys.argv[1])
    if command is None:
        logger.error(f"Unknown command: {sys.argv[1]}")
        print(USAGE, file=sys.stderr)
        return 1
    
    return command(sys.argv[2:])

if __name__ == "__main__":
    sys.exit(main())
