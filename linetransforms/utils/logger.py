"""
Logging utility for the line transformers.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance.
    
    Log records go to stderr; stdout carries the transformed text.
    
    Args:
        name: Name of the logger (typically __name__)
        level: Optional log level
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    if level is not None:
        logger.setLevel(level)
    elif not logger.level:
        logger.setLevel(logging.INFO)
        
    # Add console handler if logger has no handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        
    return logger

def set_package_level(level: int):
    """Set the level of every logger created under the package."""
    for name in list(logging.root.manager.loggerDict):
        if name.startswith('linetransforms'):
            logging.getLogger(name).setLevel(level)

def enable_debug_logging():
    """Enable debug logging for all package loggers."""
    set_package_level(logging.DEBUG)
