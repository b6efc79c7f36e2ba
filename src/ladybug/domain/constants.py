# Player physics (px, px/s, px/s^2; +y is down)
GRAVITY = 1800.0
JUMP_VELOCITY = -800.0

PLAYER_WIDTH = 60.0
PLAYER_HEIGHT = 60.0
PLAYER_X_RATIO = 0.2  # fraction of screen width
PLAYER_HITBOX_INSET = 8.0

GROUND_HEIGHT = 80.0

# Obstacles
OBSTACLE_WIDTH_RANGE = (40.0, 70.0)
OBSTACLE_HEIGHT_RANGE = (50.0, 120.0)
OBSTACLE_HITBOX_INSET = 4.0
SPAWN_OFFSET = 40.0      # spawn this far past the right edge
OFFSCREEN_MARGIN = 10.0  # evict once the right edge is this far past the left edge

# Difficulty
BASE_SPEED = 30.0
SPEED_GROWTH = 8.0
MAX_SPEED = 140.0

# Spawn intervals (seconds)
SPAWN_MIN = 0.9
SPAWN_MAX = 1.8
SPAWN_FLOOR = 0.5  # lower clamp used on re-rolls only

SCORE_RATE = 0.1
