"""
Squash Pong utility modules
"""

from squash_pong.utils.config import GameConfig
from squash_pong.utils.config import game_config
from squash_pong.utils.config import game_config_tmp
from squash_pong.utils.logging_config import setup_logging

__all__ = ["game_config", "game_config_tmp", "GameConfig", "setup_logging"]
