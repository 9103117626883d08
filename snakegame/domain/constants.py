"""
Game constants for the snake engine.
"""

# Board size (cells)
COLS = 40
ROWS = 25

# Speed scaling
SPEED_SCALE_EVERY = 5    # food items per speed step
SPEED_STEP_MS = 10
MIN_INTERVAL_MS = 40

# Food placement gives up after this many attempts per board cell
FOOD_RETRY_FACTOR = 2
