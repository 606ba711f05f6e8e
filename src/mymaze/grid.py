from .constants import WALL_CHARACTER, EMPTY_CHARACTER


class GridFrozenError(RuntimeError):
    """Raised when a cell is written after maze generation has finished."""


class Grid:
    """Wall/open occupancy grid (no I/O).

    Cells are stored column-major, indexed [x][y]. Dimensions are always odd:
    even inputs are bumped to the next odd value so the carver, which walks
    odd coordinates two cells at a time, lines up with the border.
    Once frozen by the generator the grid is read-only; a new level or a
    restart builds a new Grid instead of editing this one.
    """

    # Cell states
    WALL = 1
    OPEN = 0

    def __init__(self, width=11, height=11):
        width = max(3, int(width))
        height = max(3, int(height))
        if width % 2 == 0:
            width += 1
        if height % 2 == 0:
            height += 1
        self._width = width
        self._height = height
        self._frozen = False
        self._cells = [[self.WALL for _ in range(height)] for _ in range(width)]

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def frozen(self):
        return self._frozen

    # --- Fixed coordinates ---
    @property
    def entrance(self):
        return (1, 0)

    @property
    def exit(self):
        return (self._width - 2, self._height - 1)

    @property
    def goal(self):
        """Cell the player must stand on to win: one row above the exit."""
        return (self._width - 2, self._height - 2)

    # --- Queries ---
    def in_bounds(self, x, y):
        return 0 <= x < self._width and 0 <= y < self._height

    def is_open(self, x, y):
        # outside the grid counts as wall so edges block movement
        if not self.in_bounds(x, y):
            return False
        return self._cells[x][y] == self.OPEN

    def open_cells(self):
        for x in range(self._width):
            for y in range(self._height):
                if self._cells[x][y] == self.OPEN:
                    yield (x, y)

    def count_open(self):
        return sum(1 for _ in self.open_cells())

    # --- Mutation (generator only) ---
    def set_open(self, x, y):
        if self._frozen:
            raise GridFrozenError(f"cannot open ({x}, {y}): grid is frozen")
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the {self._width}x{self._height} grid")
        self._cells[x][y] = self.OPEN

    def freeze(self):
        self._frozen = True

    # --- Text views ---
    def get_matrix(self, marks=None):
        """Render rows (y-major) of display characters.

        marks maps (x, y) to a character drawn over the cell, e.g. the
        player or the goal.
        """
        m = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                row.append(EMPTY_CHARACTER if self._cells[x][y] == self.OPEN else WALL_CHARACTER)
            m.append(row)
        if marks:
            for (x, y), ch in marks.items():
                if self.in_bounds(x, y):
                    m[y][x] = ch
        return m

    def render(self, marks=None):
        return '\n'.join(''.join(row) for row in self.get_matrix(marks))

    def __repr__(self):
        return f"Grid(width={self._width}, height={self._height}, open={self.count_open()})"
