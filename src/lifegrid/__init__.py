"""Conway's Game of Life on a toroidal universe."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.universe import Universe, OutOfBoundsError, DimensionError
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Universe", "OutOfBoundsError", "DimensionError", "Pattern", "PatternLibrary"]
