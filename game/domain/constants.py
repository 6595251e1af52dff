"""
Game constants for the toroidal snake game.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Board settings
GRID_SIZE = 20
CELL_SIZE = 25
WINDOW_WIDTH = GRID_SIZE * CELL_SIZE
WINDOW_HEIGHT = GRID_SIZE * CELL_SIZE

START_DIRECTION = RIGHT

# Speed curve, in seconds per discrete step (smaller is faster)
BASE_SPEED = 0.1
SPEED_DECREMENT = 0.002
MIN_SPEED = 0.05

# Shell update rate
UPDATES_PER_SECOND = 60

STATS_FILE_SUFFIX = "_snake_game_stats.txt"
