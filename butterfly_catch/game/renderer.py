"""
Pygame rendering for Butterfly Catch.

The renderer only reads GameSnapshot/GameRecord views and draws them; it
never touches the simulation. Butterfly and net images are optional: when
an image is missing the renderer draws simple shapes instead.
"""

import math
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from butterfly_catch import config
from butterfly_catch.config import Colors, Fonts
from butterfly_catch.logging import get_logger
from butterfly_catch.models import ButterflyData, GamePhase, GameRecord, GameSnapshot

log = get_logger('renderer')


def fallback_color(level: int) -> Tuple[int, int, int]:
    """Per-level fallback color; levels past the palette reuse the last one."""
    palette = config.BUTTERFLY_COLORS
    return palette[min(level, len(palette)) - 1]


class AssetLibrary:
    """Optional butterfly and net images loaded from an assets directory.

    Looks for ``butterfly_<level>.png`` and ``net.png``. Missing or broken
    files are logged and left as None.
    """

    def __init__(self, assets_dir: Optional[Path] = None, max_level: int = 10):
        self.assets_dir = Path(assets_dir) if assets_dir is not None else config.ASSETS_DIR
        self.butterflies: Dict[int, Optional[pygame.Surface]] = {}
        self.net: Optional[pygame.Surface] = None
        self.max_level = max_level

    def load(self) -> 'AssetLibrary':
        """Load every image that exists. Returns self for chaining."""
        for level in range(1, self.max_level + 1):
            self.butterflies[level] = self._load_image(f"butterfly_{level}.png")
        self.net = self._load_image("net.png")
        return self

    def _load_image(self, filename: str) -> Optional[pygame.Surface]:
        path = self.assets_dir / filename
        if not path.exists():
            log.debug("No image at %s, using fallback drawing", path)
            return None
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as e:
            log.debug("Failed to load %s: %s", path, e)
            return None
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def butterfly_image(self, level: int) -> Optional[pygame.Surface]:
        return self.butterflies.get(level)


class Renderer:
    """Draws snapshots of the game onto a pygame surface.

    Examples:
        >>> surface = pygame.Surface((800, 600))
        >>> renderer = Renderer()
        >>> renderer.render(surface, session.get_state())
    """

    def __init__(self, assets: Optional[AssetLibrary] = None):
        """Create a renderer.

        Args:
            assets: Loaded images, or None to always draw fallback shapes
        """
        self.assets = assets
        self._fonts: Dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface: pygame.Surface, text: str, size: int,
              color: Tuple[int, int, int], center: Tuple[float, float]) -> None:
        rendered = self._font(size).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(int(center[0]), int(center[1]))))

    # =========================================================================
    # Gameplay
    # =========================================================================

    def render(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        """Draw one frame of gameplay."""
        self._draw_background(surface)

        for butterfly in snapshot.butterflies:
            self._draw_butterfly(surface, butterfly)

        self._draw_net(surface, snapshot)
        self._draw_hud(surface, snapshot)

        if snapshot.phase == GamePhase.COUNTDOWN:
            self._draw_countdown(surface, snapshot.countdown)
        elif snapshot.phase == GamePhase.TRANSITIONING and snapshot.transition is not None:
            self._draw_transition(surface, snapshot)

    def _draw_background(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        surface.fill(Colors.SKY)
        pygame.draw.rect(surface, Colors.GRASS, (0, int(height * 0.85), width, height))

    def _draw_butterfly(self, surface: pygame.Surface, butterfly: ButterflyData) -> None:
        cx, cy = butterfly.position.x, butterfly.position.y
        # Wing flap squeezes the drawn width
        wing_scale = 0.8 + butterfly.wing_flap * 0.4
        width = max(int(butterfly.width * wing_scale), 1)
        height = max(int(butterfly.height), 1)

        image = self.assets.butterfly_image(butterfly.level) if self.assets else None
        if image is not None:
            scaled = pygame.transform.smoothscale(image, (width, height))
            rotated = pygame.transform.rotate(scaled, -math.degrees(butterfly.rotation))
            surface.blit(rotated, rotated.get_rect(center=(int(cx), int(cy))))
        else:
            color = fallback_color(butterfly.level)
            wing_color = tuple(int(c * 0.7) for c in color)
            half_w = width / 2
            wing_rect = pygame.Rect(0, 0, max(int(half_w * 2), 1), max(int(height * 2 / 3), 1))
            wing_rect.center = (int(cx - half_w), int(cy))
            pygame.draw.ellipse(surface, wing_color, wing_rect)
            wing_rect.center = (int(cx + half_w), int(cy))
            pygame.draw.ellipse(surface, wing_color, wing_rect)
            pygame.draw.circle(surface, color, (int(cx), int(cy)), max(int(half_w), 1))

        if butterfly.is_boss:
            self._draw_crown(surface, butterfly)
            if butterfly.health < butterfly.max_health:
                self._draw_health_bar(surface, butterfly)

        if config.SHOW_CATCH_RADII:
            pygame.draw.circle(surface, Colors.RED, (int(cx), int(cy)),
                               max(int(butterfly.catch_radius), 1), 1)
        if config.SHOW_CROSSING_POINTS and butterfly.crossing_point is not None:
            point = butterfly.crossing_point
            pygame.draw.line(surface, Colors.WHITE, (int(cx), int(cy)),
                             (int(point.x), int(point.y)), 1)

    def _draw_crown(self, surface: pygame.Surface, butterfly: ButterflyData) -> None:
        cx, cy = butterfly.position.x, butterfly.position.y
        w, top = butterfly.width, cy - butterfly.height / 2
        points = [
            (cx - w / 4, top - 15),
            (cx - w / 8, top - 25),
            (cx, top - 15),
            (cx + w / 8, top - 25),
            (cx + w / 4, top - 15),
        ]
        pygame.draw.polygon(surface, Colors.GOLD, [(int(x), int(y)) for x, y in points])

    def _draw_health_bar(self, surface: pygame.Surface, butterfly: ButterflyData) -> None:
        x = int(butterfly.position.x - butterfly.width / 2)
        y = int(butterfly.position.y - butterfly.height / 2 - 10)
        full = int(butterfly.width)
        remaining = int(butterfly.width * butterfly.health / butterfly.max_health)
        pygame.draw.rect(surface, Colors.RED, (x, y, full, 5))
        pygame.draw.rect(surface, Colors.GREEN, (x, y, remaining, 5))

    def _draw_net(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        x, y = int(snapshot.pursuer.x), int(snapshot.pursuer.y)
        radius = int(snapshot.pursuer_radius)
        image = self.assets.net if self.assets else None
        if image is not None:
            scaled = pygame.transform.smoothscale(image, (radius * 2, radius * 2))
            surface.blit(scaled, scaled.get_rect(center=(x, y)))
            return
        pygame.draw.circle(surface, Colors.NET, (x, y), radius, 3)
        pygame.draw.line(surface, Colors.NET, (x - radius, y), (x + radius, y), 1)
        pygame.draw.line(surface, Colors.NET, (x, y - radius), (x, y + radius), 1)

    def _draw_hud(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        lines = [
            f"Level {snapshot.level}",
            f"Score {snapshot.score}",
            f"Time {math.ceil(snapshot.time_remaining)}",
        ]
        font = self._font(Fonts.SMALL)
        for i, line in enumerate(lines):
            rendered = font.render(line, True, Colors.HUD_TEXT)
            surface.blit(rendered, (10, 10 + i * (Fonts.SMALL + 4)))

    def _draw_countdown(self, surface: pygame.Surface, value: int) -> None:
        width, height = surface.get_size()
        self._text(surface, str(value), Fonts.HUGE, Colors.COUNTDOWN, (width / 2, height / 2))

    def _draw_transition(self, surface: pygame.Surface, snapshot: GameSnapshot) -> None:
        width, height = surface.get_size()
        transition = snapshot.transition
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        # Fade in over the first half, out over the second
        alpha = int(200 * (1 - abs(transition.progress * 2 - 1)))
        overlay.fill((*Colors.OVERLAY, alpha))
        surface.blit(overlay, (0, 0))
        self._text(surface, f"Level {transition.to_level}", Fonts.LARGE,
                   Colors.WHITE, (width / 2, height / 2))

    # =========================================================================
    # Summary
    # =========================================================================

    def render_summary(self, surface: pygame.Surface, record: GameRecord) -> None:
        """Draw the end-of-game totals."""
        width, height = surface.get_size()
        surface.fill(Colors.OVERLAY)

        self._text(surface, "Game Complete!", Fonts.LARGE, Colors.GOLD, (width / 2, height * 0.15))
        self._text(surface, f"Score: {record.score}", Fonts.MEDIUM, Colors.WHITE,
                   (width / 2, height * 0.27))
        self._text(surface, f"Butterflies caught: {record.total_caught}", Fonts.MEDIUM,
                   Colors.WHITE, (width / 2, height * 0.35))

        row_height = Fonts.SMALL + 6
        top = height * 0.45
        for level, count in record.counts_by_level().items():
            self._text(surface, f"Level {level}: {count}", Fonts.SMALL,
                       fallback_color(level), (width / 2, top + (level - 1) * row_height))

        self._text(surface, "Click or press SPACE to play again", Fonts.SMALL,
                   Colors.WHITE, (width / 2, height * 0.92))
