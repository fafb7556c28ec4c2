"""Toroidal universe for Conway's Game of Life."""

from typing import Callable, Iterable, List, Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40

DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"

RandomSource = Callable[[], float]


class OutOfBoundsError(IndexError):
    """Raised when a cell coordinate lies outside the universe."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(f"Cell ({row}, {col}) out of bounds for {height}x{width} universe")
        self.row = row
        self.col = col


class DimensionError(ValueError):
    """Raised when a universe dimension is not a positive integer."""


def _validate_dimension(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise DimensionError(f"{name} must be positive, got {value}")
    return int(value)


class Universe:
    """A fixed-size toroidal grid of cells.

    Cells live in a flat, row-major ``uint8`` buffer: the cell at
    ``(row, col)`` sits at index ``row * width + col``. Neighbor lookups wrap
    around both edges, direct indexing never does.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        """Create an all-dead universe.

        Args:
            width: Number of columns
            height: Number of rows
            random_source: Optional callable returning floats in [0, 1),
                used by randomize(). Defaults to numpy's global generator.

        Raises:
            DimensionError: If width or height is not a positive integer
        """
        self._width = _validate_dimension("width", width)
        self._height = _validate_dimension("height", height)
        self._random_source = random_source
        self._cells = np.zeros(self._width * self._height, dtype=np.uint8)
        self._generation = 0

        # Keep torch single-threaded
        torch.set_num_threads(1)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def generation(self) -> int:
        """Generations advanced since the grid was last cleared, randomized or resized."""
        return self._generation

    @property
    def cells(self) -> np.ndarray:
        """Read-only, row-major view of the cell buffer (one byte per cell)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def as_rows(self) -> np.ndarray:
        """Read-only (height, width) view of the cell buffer."""
        return self.cells.reshape(self._height, self._width)

    def to_list(self) -> List[Cell]:
        """Copy the buffer into a flat list of Cell values."""
        return [Cell(value) for value in self._cells.tolist()]

    def get_index(self, row: int, col: int) -> int:
        """Get the buffer index of a cell.

        Raises:
            OutOfBoundsError: If the coordinate is outside the universe
        """
        self._check_bounds(row, col)
        return row * self._width + col

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Raises:
            OutOfBoundsError: If the coordinate is outside the universe
        """
        return Cell(int(self._cells[self.get_index(row, col)]))

    def toggle_cell(self, row: int, col: int) -> Cell:
        """Flip a cell between dead and alive.

        Returns:
            The new state of the cell

        Raises:
            OutOfBoundsError: If the coordinate is outside the universe
        """
        idx = self.get_index(row, col)
        new_state = Cell(int(self._cells[idx])).toggled()
        self._cells[idx] = new_state
        return new_state

    def set_cells(self, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Make every given (row, col) cell alive, leaving the rest untouched.

        All coordinates are checked before any cell is written.

        Raises:
            OutOfBoundsError: If any coordinate is outside the universe
        """
        indices = [self.get_index(row, col) for row, col in coordinates]
        self._cells[indices] = Cell.ALIVE

    def neighbor_count(self, row: int, col: int) -> int:
        """Count live cells among the 8 wrapped neighbors of (row, col).

        Offsets are ``height - 1``/``width - 1`` (standing in for -1), 0 and 1,
        and every pair that is literally (0, 0) is skipped. On a grid one cell
        high or wide the first offset is itself 0, so that pair is skipped too.
        """
        count = 0
        for drow in (self._height - 1, 0, 1):
            for dcol in (self._width - 1, 0, 1):
                if drow == 0 and dcol == 0:
                    continue

                nrow = (row + drow) % self._height
                ncol = (col + dcol) % self._width
                count += int(self._cells[nrow * self._width + ncol])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count live neighbors for every cell using a circular convolution.

        Agrees with neighbor_count() on every grid size, including grids one
        cell high or wide.

        Returns:
            (height, width) integer array of neighbor counts
        """
        grid = self._cells.reshape(self._height, self._width).astype(np.float32)
        torch_input = torch.from_numpy(grid).unsqueeze(0).unsqueeze(0)

        padded = F.pad(torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)[0, 0].numpy()

        # A 1-high or 1-wide axis has two zero offsets; the extra (0, 0)
        # pairs land on the cell itself and are not counted
        zero_rows = 2 if self._height == 1 else 1
        zero_cols = 2 if self._width == 1 else 1
        skipped_self = zero_rows * zero_cols - 1
        if skipped_self:
            neighbors = neighbors - skipped_self * grid

        return neighbors.astype(np.uint8)

    def tick(self) -> None:
        """Advance the universe by one generation.

        The next generation is built in a separate buffer from a snapshot of
        the current one and swapped in once every cell has been computed.
        """
        current = self._cells.reshape(self._height, self._width)
        counts = self.count_all_neighbors()
        alive = current == Cell.ALIVE

        next_cells = current.copy()
        # Underpopulation
        next_cells[alive & (counts < 2)] = Cell.DEAD
        # Overpopulation
        next_cells[alive & (counts > 3)] = Cell.DEAD
        # Reproduction
        next_cells[~alive & (counts == 3)] = Cell.ALIVE

        self._cells = next_cells.reshape(-1)
        self._generation += 1

    def randomize(self) -> None:
        """Replace every cell with a dead or alive state at even odds."""
        size = self._width * self._height
        if self._random_source is None:
            draws = np.random.random(size)
        else:
            draws = np.fromiter((self._random_source() for _ in range(size)), dtype=np.float64, count=size)

        self._cells = np.where(draws < 0.5, Cell.ALIVE, Cell.DEAD).astype(np.uint8)
        self._generation = 0

    def clear(self) -> None:
        """Kill every cell."""
        self._cells = np.zeros(self._width * self._height, dtype=np.uint8)
        self._generation = 0

    purge = clear
    reset = clear

    def set_width(self, width: int) -> None:
        """Change the number of columns and kill every cell.

        Raises:
            DimensionError: If width is not a positive integer
        """
        self._width = _validate_dimension("width", width)
        self.clear()

    def set_height(self, height: int) -> None:
        """Change the number of rows and kill every cell.

        Raises:
            DimensionError: If height is not a positive integer
        """
        self._height = _validate_dimension("height", height)
        self.clear()

    resize_width = set_width
    resize_height = set_height

    def render(self) -> str:
        """Render one line per row, one glyph per cell."""
        glyphs = np.array([DEAD_GLYPH, ALIVE_GLYPH])
        return "".join("".join(row) + "\n" for row in glyphs[self.as_rows()])

    def copy(self) -> "Universe":
        """Return an independent copy of this universe."""
        clone = Universe(self._width, self._height, random_source=self._random_source)
        clone._cells = self._cells.copy()
        clone._generation = self._generation
        return clone

    def _check_bounds(self, row: int, col: int) -> None:
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise OutOfBoundsError(row, col, self._height, self._width)
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise OutOfBoundsError(row, col, self._height, self._width)

    def __eq__(self, other: object) -> bool:
        """Check if two universes have the same shape and cells."""
        if not isinstance(other, Universe):
            return False
        return self.width == other.width and self.height == other.height and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()
