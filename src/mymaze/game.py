import logging
import random
import time

from .constants import LEVELS, MAX_ATTEMPTS_DEFAULT, PLAYER_NAME_DEFAULT
from .generator import MazeGenerator
from .player import Player

logger = logging.getLogger(__name__)


class ScoreBoard:
    """In-memory list of (name, seconds) results, in the order they were saved."""

    def __init__(self):
        self._entries = []

    def save(self, name, seconds):
        self._entries.append((str(name), float(seconds)))

    def best(self):
        if not self._entries:
            return None
        return min(self._entries, key=lambda e: e[1])

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)


class Game:
    """Game state coordinator (no drawing, no input polling).

    Holds one maze, the player and the chrono. A UI layer calls play(),
    select_level(), move(), restart() and go_home() in response to clicks
    and key presses, and reads state, grid, player and elapsed() to draw.
    """

    MENU = 'menu'
    LEVEL_SELECT = 'level_select'
    PLAYING = 'playing'
    WON = 'won'
    QUIT = 'quit'

    def __init__(self, player_name=PLAYER_NAME_DEFAULT, clock=time.time, rng=None, seed=None,
                 max_attempts=MAX_ATTEMPTS_DEFAULT):
        if seed is not None and rng is not None:
            raise ValueError("pass either seed or rng, not both")
        self.player_name = player_name
        self.clock = clock
        self.generator = MazeGenerator(rng=rng if rng is not None else random.Random(seed),
                                       max_attempts=max_attempts)
        self.state = self.MENU
        self.level = None
        self.grid = None
        self.player = Player()
        self.scores = ScoreBoard()
        self.start_time = 0.0
        self.end_time = None

    @property
    def is_running(self):
        return self.state == self.PLAYING

    def play(self):
        if self.state == self.MENU:
            self.state = self.LEVEL_SELECT

    def quit(self):
        self.state = self.QUIT

    def select_level(self, name):
        """Start a round on a level; only honored from the level selection screen."""
        if self.state != self.LEVEL_SELECT:
            return False
        width, height = LEVELS[name]
        self.level = name
        self._new_round(width, height)
        return True

    def restart(self):
        if self.grid is None or self.state not in (self.PLAYING, self.WON):
            return False
        self._new_round(self.grid.width, self.grid.height)
        return True

    def go_home(self):
        self.end_time = None
        self.state = self.MENU

    def move(self, dx, dy):
        """Apply a one-step move while playing; return True if the player moved."""
        if abs(dx) + abs(dy) != 1:
            raise ValueError(f"move must be a single orthogonal step, got ({dx}, {dy})")
        if self.state != self.PLAYING:
            return False
        moved = self.player.try_move(self.grid, dx, dy)
        if moved and self.player.has_won(self.grid):
            self._finish()
        return moved

    def elapsed(self):
        if self.end_time is not None:
            return self.end_time - self.start_time
        if self.state != self.PLAYING:
            return 0.0
        return self.clock() - self.start_time

    def _new_round(self, width, height):
        # the old grid is dropped, never edited
        self.grid = self.generator.generate(width, height)
        self.player.reset_position()
        self.start_time = self.clock()
        self.end_time = None
        self.state = self.PLAYING
        logger.info("new %dx%d maze (level=%s)", self.grid.width, self.grid.height, self.level)

    def _finish(self):
        self.end_time = self.clock()
        self.state = self.WON
        seconds = self.end_time - self.start_time
        self.scores.save(self.player_name, seconds)
        logger.info("%s finished in %.2f sec", self.player_name, seconds)
