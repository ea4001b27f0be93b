"""Fixed game rules: board size, timing curve, lives and food cadence."""

GRID_WIDTH = 20
GRID_HEIGHT = 20

# Head of the default snake; the body trails downward from here.
START_POSITION = (10, 10)
INITIAL_SNAKE_LENGTH = 3
INITIAL_FOOD_POSITION = (5, 5)

INITIAL_TICK_MS = 225
FLOOR_TICK_MS = 50
SPEED_UP_FACTOR = 0.975
SLOW_DOWN_FACTOR = 1.1

STARTING_LIVES = 3
MAX_LIVES = 5

COUNTDOWN_START = 3
COUNTDOWN_GO = "Go"
COUNTDOWN_STEP_MS = 1000

# Every HEART_CADENCE-th food placed on the board is a heart.
HEART_CADENCE = 10
