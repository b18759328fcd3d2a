"""
Renderer protocol - defines what a presentation backend must implement
"""

from typing import Protocol

from squash_pong.core.game import Game


class RendererProtocol(Protocol):
    """
    Protocol for renderer implementations.

    The core never draws anything itself: a renderer reads the game state
    after each frame and presents it (Pygame window, headless, etc.).
    """

    def render_frame(self, game: Game, now: float) -> None:
        """
        Render a single frame of the game.

        Args:
            game: Game to draw (walls, paddle, ball in play, score, overlay)
            now: Clock time of the frame, used by the animated overlay
        """
        ...

    def to_arena_y(self, screen_y: float) -> float:
        """Convert a pointer position from screen to arena coordinates"""
        ...

    def cleanup(self) -> None:
        """Clean up renderer resources"""
        ...
