# Constants for the maze game

# Default maze size (matches the hard level)
WIDTH_DEFAULT = 23
HEIGHT_DEFAULT = 23

# Level name -> (width, height)
LEVELS = {
    'easy': (11, 11),
    'medium': (21, 21),
    'hard': (23, 23),
}
DEFAULT_LEVEL = 'hard'

# Generation
MAX_ATTEMPTS_DEFAULT = 100

# Player
PLAYER_START = (1, 1)
PLAYER_NAME_DEFAULT = 'Player 1'

# Character representations
WALL_CHARACTER = '█'
EMPTY_CHARACTER = ' '
PLAYER_CHARACTER = '@'
ENTRANCE_CHARACTER = 'E'
EXIT_CHARACTER = 'X'
GOAL_CHARACTER = '*'
