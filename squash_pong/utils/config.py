"""
Squash Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Arena dimensions
    ARENA_WIDTH: int = Field(default=800, gt=0, description="Arena width in units")
    ARENA_HEIGHT: int = Field(default=1200, gt=0, description="Arena height in units")

    # Ball
    BALL_RADIUS: float = Field(default=20.0, gt=0, description="Ball radius, also wall thickness")
    BALL_START_X: float = Field(default=30.0, description="Ball start X position")
    BALL_START_VX: float = Field(default=-500.0, description="Ball start X velocity")
    BALL_START_VY: float = Field(default=500.0, description="Ball start Y velocity")

    # Paddle
    RACKET_HEIGHT: float = Field(default=150.0, gt=0, description="Paddle height")
    PADDLE_SPEED: float = Field(default=500.0, gt=0, description="Paddle speed in units/second")

    # Animations
    COUNTDOWN_START: int = Field(default=3, ge=0, description="First countdown label")
    COUNTDOWN_FADE_IN: float = Field(default=0.5, ge=0, description="Countdown label fade-in")
    COUNTDOWN_FADE_OUT: float = Field(default=0.5, ge=0, description="Countdown label fade-out")
    GAME_OVER_SPIN_DURATION: float = Field(default=1.0, gt=0, description="One spin duration")
    GAME_OVER_SPIN_COUNT: int = Field(default=2, gt=0, description="Number of spins")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    FOREGROUND_COLOR: tuple[int, int, int] = Field(
        default=(255, 255, 255), description="RGB color of walls, ball and paddle"
    )
    SCORE_FONT_SIZE: int = Field(default=40, gt=0, description="Score label font size")
    COUNTDOWN_FONT_SIZE: int = Field(default=160, gt=0, description="Countdown font size")
    GAME_OVER_FONT_SIZE: int = Field(default=80, gt=0, description="Game over font size")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level name")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}'. Available: {list(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_arena_dimensions(self) -> "GameConfig":
        """Validate the arena is large enough for walls, ball and paddle"""
        if self.RACKET_HEIGHT >= self.ARENA_HEIGHT:
            raise ValueError(
                f"RACKET_HEIGHT ({self.RACKET_HEIGHT}) must be smaller than "
                f"ARENA_HEIGHT ({self.ARENA_HEIGHT})"
            )

        min_width = 5 * self.BALL_RADIUS
        if self.ARENA_WIDTH < min_width:
            raise ValueError(f"ARENA_WIDTH must be at least {min_width}")

        if not 0 <= self.BALL_START_X <= self.ARENA_WIDTH:
            raise ValueError(
                f"BALL_START_X ({self.BALL_START_X}) must lie inside the arena "
                f"[0, {self.ARENA_WIDTH}]"
            )

        return self

    @property
    def countdown_phase_duration(self) -> float:
        """Duration of a single countdown label"""
        return self.COUNTDOWN_FADE_IN + self.COUNTDOWN_FADE_OUT

    @property
    def game_over_duration(self) -> float:
        """Total duration of the game over animation"""
        return self.GAME_OVER_SPIN_DURATION * self.GAME_OVER_SPIN_COUNT

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "squash_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "squash_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _apply_values(self, GameConfig().to_dict())


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "squash_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, using defaults", filepath)
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    # Already validated as a whole, copy without per-field cross-checks
    _apply_values(game_config, loaded_config.to_dict())
    logger.info("Loaded configuration from %s", filepath)
    return True


def _apply_values(obj: BaseModel, values: dict[str, Any]) -> None:
    """Set several config values bypassing per-assignment cross-checks"""
    for name, value in values.items():
        object.__setattr__(obj, name, value)


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values = {name: getattr(obj, name) for name in kwargs}
    # Validate the combination once, then apply the normalized values
    validated = type(obj)(**{**obj.model_dump(), **kwargs})
    _apply_values(obj, {name: getattr(validated, name) for name in kwargs})
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _apply_values(game_config, old_values)
