"""Configuration module using Pydantic Settings.

Provides typed configuration for worlds and behaviours with environment
variable support.

Usage:
    from steerecs.config import WorldSettings, WanderSettings

    settings = WorldSettings(width=400, height=300, on_error="skip")
    wander = WanderSettings(angle_jitter=10)
"""

from steerecs.config.settings import WanderSettings, WorldSettings

__all__ = [
    "WorldSettings",
    "WanderSettings",
]
