"""Configuration module for dsconv.

Provides the user configuration model and its loader.
"""

from dsconv.config.models import Config

__all__ = ["Config"]
