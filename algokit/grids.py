"""Path counting, reachability and filling on grids of integers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping, Sequence

Grid = Sequence[Sequence[int]]
Cell = tuple[int, int]

#: Number of squares on the snake-and-ladder board.
BOARD_SIZE = 30
#: Highest roll of the die in the snake-and-ladder game.
DIE_FACES = 6

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def _dimensions(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("all grid rows must have the same length")
    return rows, cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_paths(grid: Grid) -> int:
    """Number of simple paths from the top-left to the bottom-right cell.

    The grid must be square; cells holding 1 are walls, the starting cell is
    always entered.
    """
    size, cols = _dimensions(grid)
    if size != cols:
        raise ValueError("grid must be square")
    if size == 0:
        return 0
    start: Cell = (0, 0)
    target: Cell = (size - 1, size - 1)
    if start == target:
        return 1

    paths = 0
    on_path = {start}
    frames = [(start, _neighbours(0, 0, size, size))]
    while frames:
        cell, moves = frames[-1]
        for step in moves:
            row, col = step
            if step in on_path or grid[row][col] == 1:
                continue
            if step == target:
                paths += 1
                continue
            on_path.add(step)
            frames.append((step, _neighbours(row, col, size, size)))
            break
        else:
            frames.pop()
            on_path.discard(cell)
    return paths


def path_exists(grid: Grid) -> bool:
    """Whether the cell holding 2 can be reached from the cell holding 1.

    Cells holding 0 are walls; every other cell can be walked on.
    """
    rows, cols = _dimensions(grid)
    source: Cell | None = None
    destination: Cell | None = None
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value == 1:
                source = (r, c)
            elif value == 2:
                destination = (r, c)
    if source is None or destination is None:
        raise ValueError("grid needs a source cell (1) and a destination cell (2)")

    seen = {source}
    queue = deque([source])
    while queue:
        row, col = queue.popleft()
        for step in _neighbours(row, col, rows, cols):
            r, c = step
            if step in seen or grid[r][c] == 0:
                continue
            if step == destination:
                return True
            seen.add(step)
            queue.append(step)
    return False


def shortest_path_length(grid: Grid, x: int, y: int) -> int:
    """Fewest steps from the top-left cell to ``(x, y)`` through cells holding non-zero.

    Returns -1 when the destination is outside the grid or cannot be reached.
    """
    rows, cols = _dimensions(grid)
    if not (0 <= x < rows and 0 <= y < cols):
        return -1
    if (x, y) == (0, 0):
        return 0 if grid[0][0] else -1
    if not grid[0][0]:
        return -1

    destination = (x, y)
    seen = {(0, 0)}
    queue = deque([((0, 0), 0)])
    while queue:
        (row, col), steps = queue.popleft()
        for step in _neighbours(row, col, rows, cols):
            r, c = step
            if step in seen or not grid[r][c]:
                continue
            if step == destination:
                return steps + 1
            seen.add(step)
            queue.append((step, steps + 1))
    return -1


def snake_and_ladder_moves(
    jumps: Mapping[int, int] | Iterable[tuple[int, int]],
) -> int:
    """Fewest die rolls to go from square 1 to square 30.

    ``jumps`` maps the foot of a ladder or the head of a snake to where it
    leads; later pairs override earlier ones. Returns -1 if 30 cannot be
    reached.
    """
    board = {square: square for square in range(1, BOARD_SIZE + 1)}
    for start, end in dict(jumps).items():
        if not (1 <= start <= BOARD_SIZE and 1 <= end <= BOARD_SIZE):
            raise ValueError(f"jump {start} -> {end} leaves the board")
        board[start] = end

    seen = [False] * (BOARD_SIZE + 1)
    seen[1] = True
    queue = deque([(1, 0)])
    while queue:
        square, moves = queue.popleft()
        for roll in range(1, DIE_FACES + 1):
            reached = square + roll
            if reached > BOARD_SIZE or seen[reached]:
                continue
            seen[reached] = True
            landing = board[reached]
            seen[landing] = True
            if landing == BOARD_SIZE:
                return moves + 1
            queue.append((landing, moves + 1))
    return -1


def flood_fill(grid: Grid, x: int, y: int, new_color: int) -> list[list[int]]:
    """A copy of ``grid`` with the region of ``(x, y)``'s colour repainted."""
    rows, cols = _dimensions(grid)
    if not (0 <= x < rows and 0 <= y < cols):
        raise ValueError(f"cell ({x}, {y}) is outside the grid")
    filled = [list(row) for row in grid]
    previous = filled[x][y]
    if previous == new_color:
        return filled

    stack = [(x, y)]
    while stack:
        row, col = stack.pop()
        if filled[row][col] != previous:
            continue
        filled[row][col] = new_color
        stack.extend(_neighbours(row, col, rows, cols))
    return filled