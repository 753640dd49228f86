"""
Butterfly spawner with level-based difficulty.

Decides where each new butterfly comes from and where it is heading:
an entry edge, a crossing point inside the visible area and an initial
heading aimed through that point. Also builds the per-level waves (a
staggered regular wave, or the boss and her minions on the last level) and
the random bonus groups spawned during play.

All randomness goes through one injected ``random.Random``, so a fixed seed
reproduces the exact same layouts.
"""

import math
import random
from dataclasses import dataclass
from typing import List, Optional, Union

from butterfly_catch.errors import ContractViolation
from butterfly_catch.game.butterfly import Butterfly
from butterfly_catch.logging import get_logger
from butterfly_catch.models import (
    Formation,
    GameModeConfig,
    MovementPattern,
    Resolution,
    SpawnEdge,
)

log = get_logger('spawner')

# Level formations cycle through this order
FORMATION_CYCLE = (
    Formation.LINE,
    Formation.V,
    Formation.CIRCLE,
    Formation.GRID,
    Formation.RANDOM,
)

CROSSING_MIN = 0.2
CROSSING_MAX = 0.8
HEADING_SPREAD = math.pi / 4


def choose_formation(rng: random.Random, level: Optional[int] = None) -> Formation:
    """Pick the formation for a batch of butterflies.

    With a level, formations cycle line, v, circle, grid, random by
    ``(level - 1) % 5``. Without one, a formation is drawn uniformly from rng.

    Examples:
        >>> choose_formation(random.Random(0), level=1)
        <Formation.LINE: 'line'>
        >>> choose_formation(random.Random(0), level=7)
        <Formation.V: 'v'>
    """
    if level is None:
        return rng.choice(FORMATION_CYCLE)
    return FORMATION_CYCLE[(level - 1) % len(FORMATION_CYCLE)]


@dataclass
class PlannedSpawn:
    """A butterfly waiting to be inserted after delay seconds."""
    butterfly: Butterfly
    delay: float


class Spawner:
    """Creates and places butterflies for waves and bonus groups."""

    def __init__(
        self,
        bounds: Resolution,
        config: GameModeConfig,
        rng: random.Random,
        strict: bool = True,
    ):
        """Initialize the spawner.

        Args:
            bounds: Canvas size butterflies fly across
            config: Game mode tuning
            rng: Random source shared with the session
            strict: Raise ContractViolation on bad input instead of clamping
        """
        self.bounds = bounds
        self.config = config
        self.rng = rng
        self.strict = strict

    # =========================================================================
    # Contracts
    # =========================================================================

    def validate_level(self, level: int) -> int:
        """Return a usable level, raising or clamping when out of range."""
        max_level = self.config.levels.max_level
        if 1 <= level <= max_level:
            return level
        if self.strict:
            raise ContractViolation(f"Spawn level must be in 1..{max_level}, got {level}")
        clamped = min(max(level, 1), max_level)
        log.debug("Clamped spawn level %d to %d", level, clamped)
        return clamped

    def _validate_formation(self, formation: Union[Formation, str]) -> Formation:
        try:
            return Formation(formation)
        except ValueError:
            if self.strict:
                raise ContractViolation(f"Unknown formation: {formation!r}") from None
            log.debug("Unknown formation %r, using random", formation)
            return Formation.RANDOM

    # =========================================================================
    # Placement
    # =========================================================================

    def create_butterfly(self, level: int) -> Butterfly:
        """A new butterfly of level at the origin, sharing the spawner's rng."""
        return Butterfly(self.validate_level(level), rng=self.rng,
                         entity_config=self.config.entity)

    def position_in_formation(
        self,
        butterfly: Butterfly,
        formation: Union[Formation, str],
        index: int,
        count: int,
        edge: Optional[SpawnEdge] = None,
    ) -> None:
        """Place a butterfly just outside an edge, heading across the screen.

        Every formation uses the same placement: the formation tag and the
        batch slot are recorded on the butterfly but do not change where it
        starts.

        Args:
            butterfly: Butterfly to place (mutated)
            formation: Formation tag of the batch
            index: Position of the butterfly within the batch
            count: Batch size
            edge: Entry edge; random when None
        """
        formation = self._validate_formation(formation)
        width = self.bounds.width
        height = self.bounds.height

        if edge is None:
            edge = SpawnEdge(self.rng.randrange(4))

        crossing_x = width * self.rng.uniform(CROSSING_MIN, CROSSING_MAX)
        crossing_y = height * self.rng.uniform(CROSSING_MIN, CROSSING_MAX)

        if edge == SpawnEdge.TOP:
            x, y = width * self.rng.random(), -butterfly.height * 2
        elif edge == SpawnEdge.RIGHT:
            x, y = width + butterfly.width * 2, height * self.rng.random()
        elif edge == SpawnEdge.BOTTOM:
            x, y = width * self.rng.random(), height + butterfly.height * 2
        else:
            x, y = -butterfly.width * 2, height * self.rng.random()

        direction = math.atan2(crossing_y - y, crossing_x - x)
        direction += (self.rng.random() - 0.5) * HEADING_SPREAD

        butterfly.set_position(x, y)
        butterfly.set_heading(direction)
        butterfly.crossing_point = (crossing_x, crossing_y)
        butterfly.movement_pattern = MovementPattern.DIRECT
        butterfly.formation = formation
        butterfly.formation_slot = (index, count)

    def level_speed_multiplier(self, level: int) -> float:
        """Random per-butterfly speed factor, growing with level."""
        levels = self.config.levels
        low, high = levels.speed_variation
        return self.rng.uniform(low, high) * (1 + levels.speed_bonus_per_level * (level - 1))

    # =========================================================================
    # Waves
    # =========================================================================

    def spawn_wave(self, level: int) -> List[PlannedSpawn]:
        """Build the wave for a level.

        Regular levels get ``wave_size`` butterflies inserted
        ``stagger_interval`` apart. The last level gets the boss wave.

        Returns:
            Butterflies with their insertion delays, in scheduling order
        """
        level = self.validate_level(level)
        if level == self.config.levels.max_level:
            return self.spawn_boss_wave()

        levels = self.config.levels
        formation = choose_formation(self.rng, level)
        planned = []
        for i in range(levels.wave_size):
            butterfly = self.create_butterfly(level)
            self.position_in_formation(butterfly, formation, i, levels.wave_size)
            butterfly.scale_speed(self.level_speed_multiplier(level))
            planned.append(PlannedSpawn(butterfly, i * levels.stagger_interval))

        log.info("Level %d wave: %d butterflies in %s formation",
                 level, len(planned), formation.value)
        return planned

    def spawn_boss_wave(self) -> List[PlannedSpawn]:
        """The queen at screen center plus minions flying outward in a ring."""
        boss_config = self.config.boss
        center = self.bounds.center

        queen = self.create_butterfly(self.config.levels.max_level)
        queen.make_boss(boss_config)
        queen.set_position(center.x, center.y)
        queen.set_heading(self.rng.random() * math.pi * 2)
        planned = [PlannedSpawn(queen, boss_config.insert_delay)]

        count = boss_config.minion_count
        for i in range(count):
            angle = i / count * math.pi * 2
            minion = self.create_butterfly(boss_config.minion_level)
            minion.set_position(center.x + math.cos(angle) * boss_config.minion_radius,
                                center.y + math.sin(angle) * boss_config.minion_radius)
            minion.set_heading(angle)
            minion.formation = Formation.CIRCLE
            minion.formation_slot = (i, count)
            delay = boss_config.minion_delay + boss_config.minion_delay_step * i
            planned.append(PlannedSpawn(minion, delay))

        log.info("Boss wave: queen with %d hp and %d minions", queen.health, count)
        return planned

    def spawn_bonus_group(self, level: int) -> List[Butterfly]:
        """A small extra group from one random edge, faster than the wave."""
        level = self.validate_level(level)
        bonus = self.config.bonus
        count = self.rng.randint(bonus.group_min, bonus.group_max)
        formation = choose_formation(self.rng)
        edge = SpawnEdge(self.rng.randrange(4))

        group = []
        for i in range(count):
            butterfly = self.create_butterfly(level)
            self.position_in_formation(butterfly, formation, i, count, edge)
            butterfly.scale_speed(bonus.speed_multiplier)
            group.append(butterfly)

        log.debug("Bonus group of %d from %s edge", count, edge.name.lower())
        return group
