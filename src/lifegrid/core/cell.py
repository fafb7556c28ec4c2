"""Cell state for the Game of Life universe."""

from enum import IntEnum


class Cell(IntEnum):
    """Binary cell state.

    The integer value is the byte stored in the universe buffer, so a host
    can read the buffer directly as a flat array of 0/1 values.
    """

    DEAD = 0
    ALIVE = 1

    def toggled(self) -> "Cell":
        """Return the opposite state."""
        return Cell.DEAD if self is Cell.ALIVE else Cell.ALIVE
