"""Core cellular automata logic."""

from .cell import Cell
from .universe import Universe, OutOfBoundsError, DimensionError
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Universe", "OutOfBoundsError", "DimensionError", "Pattern", "PatternLibrary"]
