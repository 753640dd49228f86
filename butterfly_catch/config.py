"""
Configuration for Butterfly Catch.

Display settings, colors and debug flags, overridable from the environment
or a .env file. Gameplay tuning (wave sizes, timers, boss stats) lives in the
YAML game mode files under modes/ and is loaded by GameModeLoader.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the package directory, then from the working directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)
load_dotenv()


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, or None when unset or empty."""
    val = os.getenv(key, '').strip()
    return int(val) if val else None


# Screen and Display Settings
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 1280)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 720)
FPS = _get_int('FPS', 60)
WINDOW_TITLE = "Butterfly Catch"

# Game mode and simulation
DEFAULT_MODE = os.getenv('BUTTERFLY_MODE', 'classic')
MODES_DIR = Path(__file__).parent / 'modes'
SEED = _get_optional_int('BUTTERFLY_SEED')  # None = random each run
STRICT_CONTRACTS = _get_bool('BUTTERFLY_STRICT_CONTRACTS', True)

# Assets (optional; missing images fall back to drawn shapes)
ASSETS_DIR = Path(os.getenv('BUTTERFLY_ASSETS_DIR', str(Path(__file__).parent / 'assets')))

# Colors (RGB tuples)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GOLD = (255, 215, 0)
RED = (210, 43, 43)
GREEN = (60, 200, 80)
NET_BROWN = (139, 69, 19)
SKY = (168, 216, 234)
GRASS = (120, 180, 90)
DARK_OVERLAY = (20, 20, 40)

# Fallback butterfly colors by level (levels past the list reuse the last)
BUTTERFLY_COLORS = [
    (255, 255, 0),    # Yellow (level 1)
    (100, 200, 255),  # Light blue (level 2)
    (255, 165, 0),    # Orange (level 3)
    (255, 105, 180),  # Pink (level 4)
    (128, 0, 128),    # Purple (level 5)
    (0, 128, 0),      # Green (level 6+)
]

# UI Settings
FONT_SIZE_SMALL = 24
FONT_SIZE_MEDIUM = 36
FONT_SIZE_LARGE = 64
FONT_SIZE_HUGE = 160


class Colors:
    """Color constants for easy access in code."""
    BLACK = BLACK
    WHITE = WHITE
    GOLD = GOLD
    RED = RED
    GREEN = GREEN
    NET = NET_BROWN
    SKY = SKY
    GRASS = GRASS
    OVERLAY = DARK_OVERLAY
    HUD_TEXT = WHITE
    COUNTDOWN = GOLD


class Fonts:
    """Font size constants for easy access in code."""
    SMALL = FONT_SIZE_SMALL
    MEDIUM = FONT_SIZE_MEDIUM
    LARGE = FONT_SIZE_LARGE
    HUGE = FONT_SIZE_HUGE


# Debug Settings (BUTTERFLY_DEBUG turns on every overlay)
DEBUG_MODE = _get_bool('BUTTERFLY_DEBUG', False)
SHOW_CATCH_RADII = _get_bool('BUTTERFLY_SHOW_CATCH_RADII', DEBUG_MODE)
SHOW_CROSSING_POINTS = _get_bool('BUTTERFLY_SHOW_CROSSING_POINTS', DEBUG_MODE)
