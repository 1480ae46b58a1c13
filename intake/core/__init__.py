"""Core: config, exception handlers, lifespan and rate limiter.

Single place for settings and application bootstrap.
"""

from intake.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
