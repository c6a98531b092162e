"""
Line Transforms - Processing Module

This module provides the two line transformers: the word respeller and the
\\circle coordinate swapper.
"""

from .word_respeller import WordRespeller, RespellResult, RespelledToken, respell_word, transform_line
from .coordinate_swapper import CoordinateSwapper, swap_coordinates

__all__ = ['WordRespeller', 'RespellResult', 'RespelledToken', 'respell_word',
           'transform_line', 'CoordinateSwapper', 'swap_coordinates']
