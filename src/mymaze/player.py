from .constants import PLAYER_START


class Player:
    def __init__(self, initial_position=PLAYER_START):
        x, y = initial_position
        self.x = int(x)
        self.y = int(y)

    def get_position(self):
        return (self.x, self.y)

    def set_position(self, x, y):
        self.x = int(x)
        self.y = int(y)

    def reset_position(self):
        self.set_position(*PLAYER_START)

    def try_move(self, grid, dx, dy):
        """Step one cell if the target is open; return True if moved.

        Blocked moves, out-of-grid targets and anything that is not a single
        orthogonal step leave the position unchanged.
        """
        if abs(int(dx)) + abs(int(dy)) != 1:
            return False
        nx, ny = self.x + int(dx), self.y + int(dy)
        if not grid.is_open(nx, ny):
            return False
        self.x, self.y = nx, ny
        return True

    def has_won(self, grid):
        return self.get_position() == grid.goal
