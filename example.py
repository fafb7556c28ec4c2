#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Universe, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    universe = Universe(12, 12)

    # Load a pattern
    library = PatternLibrary()
    glider = library.get_pattern("Glider")

    if glider:
        glider.apply_to_universe(universe, row_offset=1, col_offset=1)

        print("Initial state:")
        print(universe.render())

        # The glider crosses the bottom-right edge and reappears top-left
        for _ in range(24):
            universe.tick()
            print(f"Generation {universe.generation} (population {universe.population}):")
            print(universe.render())

    # Raw buffer, as a renderer would read it
    print(f"Buffer: {len(universe.cells)} bytes, {universe.cells.dtype}")


if __name__ == "__main__":
    main()
