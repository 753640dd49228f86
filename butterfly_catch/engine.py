"""
Main game engine for Butterfly Catch.

This module provides the pygame window, the frame loop and the wiring
between input, the game session and the renderer.
"""

from typing import Optional

import pygame

from butterfly_catch import config
from butterfly_catch.game.renderer import AssetLibrary, Renderer
from butterfly_catch.game.session import GameSession
from butterfly_catch.input.input_manager import InputManager
from butterfly_catch.input.sources.mouse import PointerInputSource
from butterfly_catch.logging import get_logger
from butterfly_catch.models import GameModeConfig, GamePhase, GameRecord, Resolution

log = get_logger('engine')


class GameEngine:
    """Main game engine managing the game loop and pygame state.

    Each frame: read the clock, feed pointer input to the session, tick the
    session, draw. ESC or closing the window quits. Once the game is
    complete the summary stays up until a click or SPACE starts a new game.

    Attributes:
        screen: Pygame display surface
        clock: Pygame clock for frame timing
        running: Whether the game loop should continue
        session: The game being played
        input_manager: Input manager for pointer and touch input
        renderer: Draws snapshots and the summary
        last_record: Record of the most recently finished game

    Examples:
        >>> engine = GameEngine()
        >>> engine.run()
    """

    def __init__(
        self,
        mode: Optional[GameModeConfig] = None,
        seed: Optional[int] = None,
        resolution: Optional[Resolution] = None,
        fps: Optional[int] = None,
    ):
        """Initialize pygame, the window and the session.

        Args:
            mode: Game mode tuning (classic when None)
            seed: RNG seed (BUTTERFLY_SEED or random when None)
            resolution: Window size (SCREEN_WIDTH x SCREEN_HEIGHT when None)
            fps: Frame rate cap (FPS when None)
        """
        pygame.init()

        self.resolution = resolution if resolution is not None else Resolution(
            width=config.SCREEN_WIDTH, height=config.SCREEN_HEIGHT)
        self.screen = pygame.display.set_mode((self.resolution.width, self.resolution.height))
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.clock = pygame.time.Clock()
        self.fps = fps if fps is not None else config.FPS
        self.running = True

        self.session = GameSession(config=mode, bounds=self.resolution, seed=seed)
        self.session.add_completion_listener(self._on_game_complete)
        self.last_record: Optional[GameRecord] = None

        self.input_manager = InputManager(
            PointerInputSource((self.resolution.width, self.resolution.height)))

        max_level = self.session.config.levels.max_level
        self.renderer = Renderer(AssetLibrary(max_level=max_level).load())

    def start_game(self) -> None:
        """Start a new game with a fresh countdown."""
        self.input_manager.discard_pending()
        self.session.start_game()
        pygame.mouse.set_visible(False)

    def _on_game_complete(self, record: GameRecord) -> None:
        self.last_record = record
        pygame.mouse.set_visible(True)
        log.info("Game over: score %d, caught %d (seed %s)",
                 record.score, record.total_caught, record.seed)

    def handle_events(self) -> None:
        """Process window, keyboard and pointer events."""
        input_events = self.input_manager.poll()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                    return
                if event.key == pygame.K_SPACE and self.session.phase == GamePhase.COMPLETE:
                    self.start_game()
                    return

        if self.session.phase == GamePhase.COMPLETE:
            if any(e.is_click for e in input_events):
                self.start_game()
            return

        self.session.handle_input(input_events)

    def update(self, dt: float) -> None:
        """Advance the session by dt seconds."""
        self.session.tick(dt)

    def render(self) -> None:
        """Draw the current frame and flip the display."""
        record = self.session.record
        if self.session.phase == GamePhase.COMPLETE and record is not None:
            self.renderer.render_summary(self.screen, record)
        else:
            self.renderer.render(self.screen, self.session.get_state())
        pygame.display.flip()

    def run(self, max_frames: Optional[int] = None) -> None:
        """Run the game loop until quit (or for max_frames frames)."""
        self.start_game()
        frames = 0
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0

            self.handle_events()
            if not self.running:
                break

            self.update(dt)
            self.render()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                break

    def quit(self) -> None:
        """Shut pygame down."""
        pygame.quit()
