WIDTH = 800
HEIGHT = 600
FULLSCREEN = False
FPS = 60
VSYNC = False
CAPTION = "Snake"
# Background (#1a1a2e) as an OpenGL clear color
BACKGROUND = (0.102, 0.102, 0.180, 1.0)
# Grid
CELL_SIZE = 16
GRID_WIDTH = WIDTH // CELL_SIZE
GRID_HEIGHT = HEIGHT // CELL_SIZE
# Snake pacing, in milliseconds between moves
INITIAL_TICK_MS = 150
TICK_STEP_MS = 3
MIN_TICK_MS = 80
FOOD_AWARD = 10
INITIAL_SNAKE_LENGTH = 1
# "rejection" (sample until free) or "free_cell" (sample from the free set)
FOOD_PLACEMENT = "rejection"
# Sprite colors (RGB 0..1)
HEAD_COLOR = (0.0, 1.0, 0.0)
BODY_COLOR = (0.0, 0.8, 0.0)
FOOD_COLOR = (1.0, 0.0, 0.0)
# HUD
HUD_FONT_SIZE = 32
GAME_OVER_FONT_SIZE = 64
SHOW_FPS = False
