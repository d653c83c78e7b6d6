"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for worlds and
wandering agents.

Usage:
    from steerecs.config import WorldSettings, WanderSettings

    # Load from environment variables (STEER_WORLD_*, STEER_WANDER_*)
    world_settings = WorldSettings()
    wander_settings = WanderSettings()

    # Or override with explicit values
    world_settings = WorldSettings(width=1024, height=768, seed=7)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WorldSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a World.

    Attributes:
        width: World width; positions wrap into [0, width).
        height: World height; positions wrap into [0, height).
        wrap: Fold positions set through World.place() into the bounds.
        seed: Seed for the world's random source (None for nondeterministic).
        on_error: What tick() does when a behaviour fails for one agent:
            "fail" re-raises, "skip" warns and leaves that agent out.
        history_size: Ticks kept by the default in-memory history store.

    Environment Variables:
        STEER_WORLD_WIDTH
        STEER_WORLD_HEIGHT
        STEER_WORLD_WRAP
        STEER_WORLD_SEED
        STEER_WORLD_ON_ERROR
        STEER_WORLD_HISTORY_SIZE
    """

    model_config = SettingsConfigDict(
        env_prefix="STEER_WORLD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    width: float = Field(default=800.0, gt=0)
    height: float = Field(default=600.0, gt=0)
    wrap: bool = True
    seed: int | None = None
    on_error: Literal["fail", "skip"] = "fail"
    history_size: int = Field(default=1000, ge=1)


class WanderSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for WanderingBehaviour.

    Attributes:
        radius: Radius of the wander circle.
        distance: Half the distance from the agent to the circle center.
        angle_jitter: Maximum per-tick rotation of the jitter vector, in degrees.

    Environment Variables:
        STEER_WANDER_RADIUS
        STEER_WANDER_DISTANCE
        STEER_WANDER_ANGLE_JITTER
    """

    model_config = SettingsConfigDict(
        env_prefix="STEER_WANDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    radius: float = Field(default=25.0, ge=0)
    distance: float = Field(default=25.0, ge=0)
    angle_jitter: float = Field(default=5.0, ge=0)
