# src/blogcred/core/__init__.py

"""
Core infrastructure for blogcred: configuration loading and shared errors.
"""

from .config import BlogCredConfig, ScoringConfig, ModerationConfig, load_config
from .errors import BlogCredError, PublicationRefused, PostNotFound

__all__ = [
    "BlogCredConfig",
    "ScoringConfig",
    "ModerationConfig",
    "load_config",
    "BlogCredError",
    "PublicationRefused",
    "PostNotFound",
]
