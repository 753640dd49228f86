"""
Butterfly entity for Butterfly Catch.

A butterfly is a single catchable actor. It owns its per-frame kinematics
(straight flight with an optional small wobble, a one-time speed boost when it
first appears on screen, removal after it leaves again) and its hit test.

Level parameters follow the classic tuning: higher levels are smaller,
faster and have a smaller catch radius.

Examples:
    >>> import random
    >>> butterfly = Butterfly(level=1, rng=random.Random(1))
    >>> butterfly.set_position(100.0, 100.0)
    >>> butterfly.set_heading(0.0)
    >>> butterfly.update(0.5, 800, 600)
    >>> round(butterfly.x)
    148
"""

import math
import random
from typing import Optional, Tuple

from butterfly_catch.errors import ContractViolation
from butterfly_catch.models import (
    BossConfig,
    ButterflyData,
    EntityConfig,
    Formation,
    MovementPattern,
    Point2D,
)

BASE_SIZE = 50.0
MIN_SIZE_FACTOR = 0.7
BASE_SPEED = 80.0
SPEED_PER_LEVEL = 15.0
BASE_CATCH_RADIUS = 40.0
MIN_CATCH_RADIUS = 15.0


def size_for_level(level: int) -> float:
    """Butterfly width/height in pixels. Non-increasing in level."""
    return BASE_SIZE * max(1.2 - level * 0.05, MIN_SIZE_FACTOR)


def speed_for_level(level: int) -> float:
    """Base flight speed in pixels per second. Non-decreasing in level."""
    return BASE_SPEED + level * SPEED_PER_LEVEL


def catch_radius_for_level(level: int) -> float:
    """Catch radius in pixels. Non-increasing in level."""
    return max(BASE_CATCH_RADIUS - level * 3, MIN_CATCH_RADIUS)


def wing_flap_period_for_level(level: int) -> float:
    """Seconds per wing flap; higher levels flap faster."""
    return 0.08 + level * 0.008


class Butterfly:
    """A moving, catchable butterfly.

    Position is the center of the butterfly. Velocity is always derived from
    ``direction`` and ``speed``; use set_heading() rather than writing the
    components directly.

    Attributes:
        level: Level (1-based) that selects size, speed and art
        x, y: Center position in screen coordinates
        vx, vy: Velocity in pixels per second
        width, height: Size in pixels
        base_speed: Level speed before any multipliers
        speed: Current speed
        direction: Heading in radians
        catch_radius: Hit radius added to the net radius
        movement_pattern: LINEAR or DIRECT
        has_crossed_screen: Set once the butterfly has been on screen
        should_remove: Set once it has crossed and left the screen again
        is_boss: True for the level 10 queen
        health: Hits left before a boss is caught
        crossing_point: Interior point the spawn heading aimed through
    """

    def __init__(
        self,
        level: int,
        rng: Optional[random.Random] = None,
        entity_config: Optional[EntityConfig] = None,
    ):
        """Create a butterfly with its level's parameters at the origin.

        Args:
            level: Butterfly level, 1 or higher
            rng: Random source for wobble and boss heading changes
            entity_config: Movement tuning (defaults to the classic values)

        Raises:
            ContractViolation: If level is below 1
        """
        if level < 1:
            raise ContractViolation(f"Butterfly level must be >= 1, got {level}")

        self.level = level
        self._rng = rng if rng is not None else random.Random()
        self._config = entity_config if entity_config is not None else EntityConfig()

        size = size_for_level(level)
        self.width = size
        self.height = size

        self.x = 0.0
        self.y = 0.0

        self.base_speed = speed_for_level(level)
        self.speed = self.base_speed
        self.direction = 0.0
        self.vx = 0.0
        self.vy = 0.0

        # Cosmetic only; the renderer reads wing_flap_state
        self.wing_flap_period = wing_flap_period_for_level(level)
        self.wing_flap_time = 0.0
        self.wing_flap_state = 0.0

        self.movement_pattern = MovementPattern.LINEAR
        self.catch_radius = catch_radius_for_level(level)

        self.has_crossed_screen = False
        self.should_remove = False

        self.is_boss = False
        self.health = 1
        self.max_health = 1

        self.crossing_point: Optional[Tuple[float, float]] = None
        self.formation: Optional[Formation] = None
        self.formation_slot = (0, 1)  # (index, count) within the spawned batch

    # =========================================================================
    # Setup
    # =========================================================================

    def set_position(self, x: float, y: float) -> None:
        """Place the butterfly center at (x, y)."""
        self.x = x
        self.y = y

    def set_heading(self, direction: float, speed: Optional[float] = None) -> None:
        """Set heading (radians) and optionally speed, then recompute velocity."""
        self.direction = direction
        if speed is not None:
            self.speed = speed
        self._apply_velocity()

    def scale_speed(self, factor: float) -> None:
        """Multiply current speed, keeping the heading."""
        self.speed *= factor
        self._apply_velocity()

    def make_boss(self, boss: BossConfig) -> None:
        """Turn this butterfly into the boss-level queen."""
        self.width *= boss.size_multiplier
        self.height *= boss.size_multiplier
        self.catch_radius *= boss.catch_radius_multiplier
        self.speed *= boss.speed_multiplier
        self.health = boss.health
        self.max_health = boss.health
        self.is_boss = True
        self._apply_velocity()

    def _apply_velocity(self) -> None:
        self.vx = math.cos(self.direction) * self.speed
        self.vy = math.sin(self.direction) * self.speed

    # =========================================================================
    # Per-frame update
    # =========================================================================

    def update(self, dt: float, width: float, height: float) -> None:
        """Advance the butterfly by dt seconds on a width x height canvas.

        Args:
            dt: Time delta in seconds
            width: Canvas width in pixels
            height: Canvas height in pixels
        """
        self.wing_flap_time += dt
        self.wing_flap_state = abs(math.sin(self.wing_flap_time / self.wing_flap_period * math.pi))

        if self.movement_pattern == MovementPattern.DIRECT:
            if self._rng.random() < self._config.wobble_chance:
                self.direction += (self._rng.random() - 0.5) * self._config.wobble_amount
                self._apply_velocity()

        self.x += self.vx * dt
        self.y += self.vy * dt

        if not self.has_crossed_screen and self.is_visible(width, height):
            self.has_crossed_screen = True
            # Slingshot: applied once, on first entry
            self.scale_speed(self._config.slingshot)

        if self.has_crossed_screen and self.is_beyond_margin(width, height):
            self.should_remove = True

    def is_visible(self, width: float, height: float) -> bool:
        """True if the center is strictly inside the canvas."""
        return 0 < self.x < width and 0 < self.y < height

    def is_beyond_margin(self, width: float, height: float) -> bool:
        """True if the center is more than the removal margin off any edge."""
        margin = self._config.screen_margin
        return (self.x < -margin or
                self.x > width + margin or
                self.y < -margin or
                self.y > height + margin)

    # =========================================================================
    # Hit testing
    # =========================================================================

    def distance_to(self, x: float, y: float) -> float:
        """Distance from the butterfly center to (x, y)."""
        return math.hypot(x - self.x, y - self.y)

    def check_catch(self, x: float, y: float, pursuer_radius: float) -> bool:
        """Test a catch attempt at (x, y).

        A regular butterfly is caught when the point is within
        ``catch_radius + pursuer_radius`` of its center. A boss loses one
        health per hit and is only caught when health reaches zero; each
        surviving hit sends it off on a new random heading, faster.

        Args:
            x: Click x coordinate
            y: Click y coordinate
            pursuer_radius: Catch radius of the net

        Returns:
            True if the butterfly is caught and should be removed
        """
        hit = self.distance_to(x, y) <= self.catch_radius + pursuer_radius
        if not hit:
            return False

        if self.is_boss:
            self.health -= 1
            if self.health <= 0:
                return True
            self.speed *= self._config.boss_hit_speedup
            self.set_heading(self._rng.random() * math.pi * 2)
            return False

        return True

    # =========================================================================
    # Views
    # =========================================================================

    def to_data(self) -> ButterflyData:
        """Immutable snapshot for the renderer."""
        crossing = None
        if self.crossing_point is not None:
            crossing = Point2D(x=self.crossing_point[0], y=self.crossing_point[1])
        return ButterflyData(
            position=Point2D(x=self.x, y=self.y),
            width=self.width,
            height=self.height,
            rotation=math.atan2(self.vy, self.vx),
            wing_flap=min(max(self.wing_flap_state, 0.0), 1.0),
            level=self.level,
            is_boss=self.is_boss,
            health=max(self.health, 0),
            max_health=self.max_health,
            catch_radius=self.catch_radius,
            crossing_point=crossing,
        )

    def __repr__(self) -> str:
        """String representation for debugging."""
        boss = f", boss hp={self.health}" if self.is_boss else ""
        return (f"Butterfly(level={self.level}, pos=({self.x:.1f}, {self.y:.1f}), "
                f"speed={self.speed:.1f}{boss})")
