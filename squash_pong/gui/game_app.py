"""
Squash Pong application: pygame window, pointer input and the frame loop
"""

import argparse
import logging
import sys

import pygame

from squash_pong.core.driver import FrameDriver
from squash_pong.core.game import Game
from squash_pong.core.game import ScoreChanged
from squash_pong.core.game import StateChanged
from squash_pong.core.interfaces.renderer import RendererProtocol
from squash_pong.gui.pygame_renderer import PygameRenderer
from squash_pong.utils.config import LOG_LEVELS
from squash_pong.utils.config import game_config
from squash_pong.utils.config import load_config_from_file
from squash_pong.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class SquashPongApp:
    """Hosts the game in a pygame window"""

    def __init__(self, scale: float = 0.6):
        self.driver = FrameDriver(Game())
        self.renderer: RendererProtocol = PygameRenderer(self.driver.game.arena, scale)
        self.clock = pygame.time.Clock()
        self.running = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Map pygame events to game input"""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.driver.on_input_start(self.renderer.to_arena_y(event.pos[1]))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.driver.on_input_end()
        elif event.type == pygame.FINGERDOWN:
            # Finger positions are normalized to the window size
            window_height = pygame.display.get_surface().get_height()
            self.driver.on_input_start(self.renderer.to_arena_y(event.y * window_height))
        elif event.type == pygame.FINGERUP:
            self.driver.on_input_end()

    def run(self) -> None:
        """Main loop, one game tick per rendered frame"""
        self.running = True
        logger.info("Squash Pong started")

        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)

            now = pygame.time.get_ticks() / 1000.0
            for game_event in self.driver.on_frame(now):
                if isinstance(game_event, ScoreChanged):
                    logger.debug("Score: %d", game_event.score)
                elif isinstance(game_event, StateChanged):
                    logger.debug("State: %s", game_event.status.value)

            self.renderer.render_frame(self.driver.game, now)
            self.clock.tick(game_config.FPS)

    def cleanup(self) -> None:
        """Clean up resources"""
        self.renderer.cleanup()
        logger.info("Squash Pong closed after %d games", self.driver.game.games_played)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Squash Pong")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument("--scale", type=float, default=0.6, help="Window scale of the arena")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = parse_args(argv)

    if args.config:
        load_config_from_file(args.config)
    if args.log_level:
        game_config.LOG_LEVEL = args.log_level
    setup_logging()

    app = None
    try:
        app = SquashPongApp(scale=args.scale)
        app.run()
    except KeyboardInterrupt:
        logger.info("User interruption")
    finally:
        if app is not None:
            app.cleanup()
        pygame.quit()


if __name__ == "__main__":
    main(sys.argv[1:])
