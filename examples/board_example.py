"""Example usage of the blackboard drawing API.

This example demonstrates:
- Creating a board and adding shapes directly
- Loading shapes from record lines (bad lines are skipped)
- Listing, rendering, undoing and redoing

Running the Example:
    python examples/board_example.py
"""

from __future__ import annotations

from pathlib import Path

from blackboard_py import Board, Rectangle, Triangle, load_file, load_lines


def main() -> None:
    """Demonstrate Board functionality."""
    print("=== Blackboard Demo ===\n")

    # 1. Create a board and add shapes directly
    print("1. Adding a triangle and a rectangle...")
    board = Board()
    board.add(Triangle(40, 1, height=6))
    board.add(Rectangle(3, 6, width=8, height=5))
    print(f"   Shapes: {board.list()}")
    print()

    # 2. Load shapes from record lines
    print("2. Loading records (the Hexagon line is skipped)...")
    added = load_lines(board, ["add Circle 10 5 5", "add Hexagon abc", "add Line -1 12 15"])
    print(f"   Added: {[shape.label for shape in added]}")
    print(f"   Ids: {[shape.id for shape in added]}")
    print()

    # 3. Render
    print("3. Rendering the board:")
    print(board.render())
    print()

    # 4. Undo and redo
    print("4. Undoing the line, then redoing it...")
    board.undo()
    print(f"   After undo: {board.list()}")
    board.redo()
    print(f"   After redo: {board.list()}")
    print()

    # 5. Load the sample record file next to this script
    print("5. Loading examples/shapes.txt onto a fresh board...")
    fresh = Board()
    load_file(fresh, Path(__file__).parent / "shapes.txt")
    print(f"   Shapes: {fresh.list()}")
    print(fresh.render())

    print("\n=== Demo Complete ===")


if __name__ == "__main__":
    main()
