"""
PyGame renderer for Squash Pong game
"""

import math

import pygame

from squash_pong.core.entities import Arena
from squash_pong.core.entities import Ball
from squash_pong.core.entities import Paddle
from squash_pong.core.game import GAME_OVER_TEXT
from squash_pong.core.game import Game
from squash_pong.core.game import Overlay
from squash_pong.core.geometry import Rect
from squash_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer, arena units are y-up and scaled to the window"""

    def __init__(self, arena: Arena, scale: float = 1.0):
        self.arena = arena
        self.scale = scale
        self.width = int(arena.width * scale)
        self.height = int(arena.height * scale)

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Squash Pong")

        self.background_color: tuple[int, int, int] = game_config.BACKGROUND_COLOR
        self.color: tuple[int, int, int] = game_config.FOREGROUND_COLOR

        self.font_score = pygame.font.Font(None, self._font_size(game_config.SCORE_FONT_SIZE))
        self.font_countdown = pygame.font.Font(
            None, self._font_size(game_config.COUNTDOWN_FONT_SIZE)
        )
        self.font_game_over = pygame.font.Font(
            None, self._font_size(game_config.GAME_OVER_FONT_SIZE)
        )

    def _font_size(self, size: int) -> int:
        return max(1, int(size * self.scale))

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        """Arena point to screen pixel"""
        return int(x * self.scale), int((self.arena.height - y) * self.scale)

    def to_screen_rect(self, rect: Rect) -> pygame.Rect:
        left, top = self.to_screen(rect.left, rect.top)
        return pygame.Rect(left, top, int(rect.width * self.scale), int(rect.height * self.scale))

    def to_arena_y(self, screen_y: float) -> float:
        """Screen pixel row to arena Y coordinate"""
        return self.arena.height - screen_y / self.scale

    def clear_screen(self) -> None:
        self.screen.fill(self.background_color)

    def draw_rect(self, rect: Rect) -> None:
        pygame.draw.rect(self.screen, self.color, self.to_screen_rect(rect))

    def draw_ball(self, ball: Ball) -> None:
        """Draw the game ball"""
        center = self.to_screen(ball.position.x, ball.position.y)
        pygame.draw.circle(self.screen, self.color, center, int(ball.radius * self.scale))

    def draw_paddle(self, paddle: Paddle) -> None:
        self.draw_rect(paddle.get_rect())

    def draw_score(self, text: str) -> None:
        """Draw the score near the top wall"""
        surface = self.font_score.render(text, True, self.color)
        rect = surface.get_rect()
        rect.center = self.to_screen(self.arena.width / 2, self.arena.height - 100)
        self.screen.blit(surface, rect)

    def draw_overlay(self, overlay: Overlay) -> None:
        """Draw the countdown or game over label in the arena centre"""
        font = self.font_game_over if overlay.text == GAME_OVER_TEXT else self.font_countdown
        surface = font.render(overlay.text, True, self.color).convert_alpha()
        surface.set_alpha(int(255 * max(0.0, min(1.0, overlay.opacity))))
        if overlay.rotation:
            surface = pygame.transform.rotate(surface, math.degrees(overlay.rotation))
        rect = surface.get_rect()
        rect.center = self.to_screen(self.arena.width / 2, self.arena.mid_y)
        self.screen.blit(surface, rect)

    def render_frame(self, game: Game, now: float) -> None:
        """Render a single frame of the game"""
        self.clear_screen()

        for wall in game.walls:
            self.draw_rect(wall.rect)

        self.draw_paddle(game.paddle)
        if game.ball.in_play:
            self.draw_ball(game.ball)

        self.draw_score(game.score_text)

        overlay = game.overlay(now)
        if overlay is not None:
            self.draw_overlay(overlay)

        pygame.display.flip()

    def cleanup(self) -> None:
        pygame.display.quit()
