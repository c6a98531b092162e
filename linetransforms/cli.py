"""
Command-line interface for the line transformers.
"""

import argparse
import logging
import sys
from typing import List

from .config import load_config
from .processing.coordinate_swapper import CoordinateSwapper
from .processing.word_respeller import WordRespeller
from .utils.file_handler import iter_lines, read_first_line
from .utils.logger import enable_debug_logging, get_logger, set_package_level

logger = get_logger(__name__)

def _build_parser(description: str, input_help: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    
    parser.add_argument(
        "-i", "--input",
        help=input_help
    )
    
    parser.add_argument(
        "--config",
        help="Path to a YAML config file overriding the defaults"
    )
    
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on stderr"
    )
    
    return parser

def _configure_logging(debug: bool):
    if debug:
        enable_debug_logging()
    else:
        set_package_level(logging.WARNING)

def respell_command(argv: List[str]) -> int:
    """Respell the words of a single line."""
    parser = _build_parser(
        "Respell the words of one line read from stdin",
        "Read the line from the first line of this file instead of stdin"
    )
    args = parser.parse_args(argv)
    _configure_logging(args.debug)
    
    try:
        config = load_config(args.config)
        line = read_first_line(args.input)
    except Exception as e:
        logger.error(f"Error reading input: {str(e)}")
        return 1
    
    respeller = WordRespeller(config['respell'])
    print(respeller.transform(line))
    return 0

def swap_command(argv: List[str]) -> int:
    """Swap \\circle coordinates on every line of the input."""
    parser = _build_parser(
        "Swap the coordinates of \\circle{(A,B)...} tokens on every stdin line",
        "Read lines from this file instead of stdin"
    )
    args = parser.parse_args(argv)
    _configure_logging(args.debug)
    
    try:
        config = load_config(args.config)
        swapper = CoordinateSwapper(config['swap'])
        for line in swapper.stream(iter_lines(args.input)):
            print(line, flush=True)
    except Exception as e:
        logger.error(f"Error processing input: {str(e)}")
        return 1
    
    return 0
