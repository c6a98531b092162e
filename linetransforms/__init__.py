"""
Line Transforms

Two standalone text transformations: a whimsical word respeller and a
coordinate swapper for \\circle{(A,B)} markup.
"""

from .processing import WordRespeller, CoordinateSwapper, transform_line, swap_coordinates

__version__ = "0.1.0"

__all__ = ['WordRespeller', 'CoordinateSwapper', 'transform_line', 'swap_coordinates']
