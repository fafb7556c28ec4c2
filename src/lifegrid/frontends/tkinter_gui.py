"""Tkinter GUI frontend for Conway's Game of Life."""

import tkinter as tk
from typing import Optional, Tuple

from ..core.cell import Cell
from ..core.universe import Universe

CELL_SIZE = 15  # pixels
GRID_COLOR = "#28292c"
ALIVE_COLOR = "#b0b4b9"
DEAD_COLOR = "#000000"
BUTTON_BG = "#555555"


class LifeCanvasGUI:
    """Tkinter canvas that draws a universe and lets the user play with it."""

    def __init__(self, master: tk.Tk, universe: Optional[Universe] = None) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            universe: Universe to display (defaults to a new 40x40 one)
        """
        self.master = master
        self.master.title("Conway's Game of Life")
        self.master.configure(bg="#333333")

        self.universe = universe if universe is not None else Universe()
        self.width = self.universe.width
        self.height = self.universe.height

        self.canvas_width = (CELL_SIZE + 1) * self.width + 1
        self.canvas_height = (CELL_SIZE + 1) * self.height + 1

        self.frame_rate = 30
        self.update_interval = 1000 // self.frame_rate
        self._after_id: Optional[str] = None

        self.setup_ui()
        self.draw_grid()
        self.draw_cells()

    @property
    def running(self) -> bool:
        """Whether the animation loop is scheduled."""
        return self._after_id is not None

    def setup_ui(self) -> None:
        """Set up the user interface."""
        control_frame = tk.Frame(self.master, bg="#333333")
        control_frame.pack(pady=5)

        self.play_pause_btn = self._create_button(control_frame, "Play", self.toggle_running)
        self.random_btn = self._create_button(control_frame, "Random", self.randomize)
        self.reset_btn = self._create_button(control_frame, "Reset", self.reset)
        self.purge_btn = self._create_button(control_frame, "Purge", self.purge)

        self.canvas = tk.Canvas(
            self.master,
            width=self.canvas_width,
            height=self.canvas_height,
            bg=DEAD_COLOR,
            highlightthickness=0,
        )
        self.canvas.pack(padx=5, pady=5)
        self.canvas.bind("<Button-1>", self.on_click)

    def _create_button(self, parent: tk.Frame, text: str, command) -> tk.Button:
        button = tk.Button(parent, text=text, command=command, bg=BUTTON_BG, fg="white", font=("Arial", 9))
        button.pack(side=tk.LEFT, padx=3)
        return button

    def play(self) -> None:
        """Start the animation loop."""
        self.play_pause_btn.config(text="Pause")
        if self._after_id is None:
            self.animate()

    def pause(self) -> None:
        """Stop the animation loop."""
        self.play_pause_btn.config(text="Play")
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None

    def toggle_running(self) -> None:
        """Toggle between playing and paused."""
        if self.running:
            self.pause()
        else:
            self.play()

    def animate(self) -> None:
        """Draw the current generation, advance, and schedule the next frame."""
        self.draw_grid()
        self.draw_cells()
        self.universe.tick()
        self._after_id = self.master.after(self.update_interval, self.animate)

    def randomize(self) -> None:
        """Pause and fill the universe at random."""
        self.pause()
        self.universe.randomize()
        self.redraw()

    def reset(self) -> None:
        """Pause and kill every cell."""
        self.pause()
        self.universe.reset()
        self.redraw()

    def purge(self) -> None:
        """Kill every cell without stopping the animation."""
        self.universe.purge()
        self.redraw()

    def cell_at_position(self, canvas_x: int, canvas_y: int) -> Tuple[int, int]:
        """Map canvas coordinates to a (row, col), clamped to the last row and column."""
        row = min(max(canvas_y, 0) // (CELL_SIZE + 1), self.height - 1)
        col = min(max(canvas_x, 0) // (CELL_SIZE + 1), self.width - 1)
        return row, col

    def on_click(self, event: tk.Event) -> None:
        """Handle mouse click on canvas."""
        row, col = self.cell_at_position(event.x, event.y)
        self.universe.toggle_cell(row, col)
        self.redraw()

    def redraw(self) -> None:
        """Redraw grid lines and cells."""
        self.draw_grid()
        self.draw_cells()

    def draw_grid(self) -> None:
        """Draw the grid lines."""
        self.canvas.delete("grid")
        for i in range(self.width + 1):
            x = i * (CELL_SIZE + 1) + 1
            self.canvas.create_line(x, 0, x, self.canvas_height, fill=GRID_COLOR, tags="grid")
        for j in range(self.height + 1):
            y = j * (CELL_SIZE + 1) + 1
            self.canvas.create_line(0, y, self.canvas_width, y, fill=GRID_COLOR, tags="grid")

    def draw_cells(self) -> None:
        """Draw every cell from the universe's raw buffer."""
        self.canvas.delete("cell")
        cells = self.universe.cells

        for row in range(self.height):
            for col in range(self.width):
                idx = row * self.width + col
                color = DEAD_COLOR if cells[idx] == Cell.DEAD else ALIVE_COLOR

                x1 = col * (CELL_SIZE + 1) + 1
                y1 = row * (CELL_SIZE + 1) + 1
                self.canvas.create_rectangle(
                    x1, y1, x1 + CELL_SIZE, y1 + CELL_SIZE, fill=color, outline="", tags="cell"
                )


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    root = tk.Tk()
    root.resizable(False, False)

    # Check for test mode
    import sys

    test_mode = "--test" in sys.argv

    app = LifeCanvasGUI(root)

    if test_mode:
        print("Running in test mode...")
        app.universe.randomize()
        app.play()

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.universe.generation} generations.")
            app.pause()
            root.quit()
            root.destroy()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
