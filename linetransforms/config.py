"""
Configuration defaults and YAML loading.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .utils.file_handler import read_yaml
from .utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    'respell': {
        'articles': ['the', 'a', 'an'],
        'joiner': ', ',
    },
    'swap': {
        'command': 'circle',
    },
}

def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load configuration, merging a YAML file's sections over the defaults.

    Args:
        path: Optional path to a YAML config file

    Returns:
        Dictionary with 'respell' and 'swap' sections
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    data = read_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    for section, values in data.items():
        if section not in config:
            logger.warning(f"Ignoring unknown config section '{section}'")
            continue
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        config[section].update(values)

    _validate(config)
    logger.debug(f"Loaded config from {path}: {config}")
    return config

def _validate(config: Dict[str, Dict[str, Any]]):
    articles = config['respell']['articles']
    if not isinstance(articles, list) or not all(isinstance(a, str) for a in articles):
        raise ValueError("respell.articles must be a list of strings")
    if not isinstance(config['respell']['joiner'], str):
        raise ValueError("respell.joiner must be a string")
    command = config['swap']['command']
    if not isinstance(command, str) or not command:
        raise ValueError("swap.command must be a non-empty string")
