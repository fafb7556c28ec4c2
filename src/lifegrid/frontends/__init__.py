"""Frontend interfaces for the Game of Life universe."""

from .cli import CLILife

__all__ = ["CLILife"]
