import logging
import random

from .constants import MAX_ATTEMPTS_DEFAULT
from .grid import Grid

logger = logging.getLogger(__name__)


class MazeGenerationError(RuntimeError):
    """Raised when no valid maze was produced within the retry limit."""


# Neighbor offsets two cells away: north, east, south, west
DIRECTIONS = [(0, -2), (2, 0), (0, 2), (-2, 0)]


class MazeGenerator:
    """Carve mazes with randomized iterative depth-first backtracking.

    Only cells with both coordinates odd are rooms; the even cell between
    two rooms is the connecting passage. Every pop from the carving stack
    opens all still-walled neighbors in shuffled order, not just one, which
    gives a bushier maze than textbook backtracking. Each room is opened
    exactly once together with a single connector, so the result is a tree.

    The RNG is owned by the caller; pass a seeded random.Random for
    reproducible output.
    """

    def __init__(self, rng=None, max_attempts=MAX_ATTEMPTS_DEFAULT):
        if int(max_attempts) < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts!r}")
        self.rng = rng if rng is not None else random.Random()
        self.max_attempts = int(max_attempts)
        self.attempts = 0

    def generate(self, width, height):
        """Return a frozen Grid with entrance and exit open.

        Retries with fresh random draws when the exit repair finds nothing
        to connect; raises MazeGenerationError after max_attempts.
        """
        self.attempts = 0
        while self.attempts < self.max_attempts:
            self.attempts += 1
            grid = Grid(width, height)
            self._carve(grid)
            self._open_entrance_exit(grid)
            if self._repair_exit(grid):
                grid.freeze()
                logger.debug("generated %dx%d maze in %d attempt(s), %d open cells",
                             grid.width, grid.height, self.attempts, grid.count_open())
                return grid
            logger.warning("maze %dx%d has no open cell to join the exit, retrying (attempt %d/%d)",
                           grid.width, grid.height, self.attempts, self.max_attempts)
        raise MazeGenerationError(
            f"could not generate a {width}x{height} maze in {self.max_attempts} attempts")

    def _carve(self, grid):
        w, h = grid.width, grid.height
        grid.set_open(1, 1)
        stack = [(1, 1)]
        while stack:
            x, y = stack.pop()
            dirs = list(DIRECTIONS)
            self.rng.shuffle(dirs)
            for dx, dy in dirs:
                nx, ny = x + dx, y + dy
                if 0 < nx < w - 1 and 0 < ny < h - 1 and not grid.is_open(nx, ny):
                    grid.set_open(nx, ny)
                    grid.set_open(x + dx // 2, y + dy // 2)
                    stack.append((nx, ny))

    def _open_entrance_exit(self, grid):
        grid.set_open(*grid.entrance)
        grid.set_open(*grid.exit)

    def _repair_exit(self, grid):
        """Open the bottom inner row cell of the first column holding any open cell.

        Heuristic only: it does not search for a real path to the exit.
        Returns False when no column has an open cell.
        """
        bottom = grid.height - 2
        for x in range(1, grid.width - 1):
            for y in range(bottom, -1, -1):
                if grid.is_open(x, y):
                    grid.set_open(x, bottom)
                    return True
        return False


def generate_maze(width, height, seed=None, rng=None, max_attempts=MAX_ATTEMPTS_DEFAULT):
    """Generate a maze of (at least) width x height cells.

    Use seed for a reproducible maze, or rng to draw from a caller-owned
    random.Random. Without either the maze differs on every call.
    """
    if seed is not None and rng is not None:
        raise ValueError("pass either seed or rng, not both")
    if rng is None:
        rng = random.Random(seed)
    return MazeGenerator(rng=rng, max_attempts=max_attempts).generate(width, height)
