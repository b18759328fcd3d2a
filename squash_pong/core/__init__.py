"""
Core module of Squash Pong game
"""

from squash_pong.core.collision import CollisionWorld
from squash_pong.core.collision import Contact
from squash_pong.core.driver import FrameDriver
from squash_pong.core.entities import Arena
from squash_pong.core.entities import Ball
from squash_pong.core.entities import Paddle
from squash_pong.core.entities import Wall
from squash_pong.core.entities import WallSide
from squash_pong.core.game import Game
from squash_pong.core.game import GameStatus
from squash_pong.core.game import ScoreChanged
from squash_pong.core.game import StateChanged
from squash_pong.core.geometry import Vector2D
from squash_pong.core.input import Direction

__all__ = [
    "Arena",
    "Ball",
    "Paddle",
    "Wall",
    "WallSide",
    "CollisionWorld",
    "Contact",
    "Direction",
    "FrameDriver",
    "Game",
    "GameStatus",
    "ScoreChanged",
    "StateChanged",
    "Vector2D",
]
