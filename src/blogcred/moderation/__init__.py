# src/blogcred/moderation/__init__.py

"""
Moderation layer for blogcred.
Gates publication on the credibility verdict and manages the review queue.
"""

from .posts import (
    PostDraft,
    PostStatus,
    CommentStatus,
    parse_sources,
    parse_tags,
    extract_urls,
)
from .store import PostStore, InMemoryPostStore
from .workflow import ModerationWorkflow

__all__ = [
    "PostDraft",
    "PostStatus",
    "CommentStatus",
    "parse_sources",
    "parse_tags",
    "extract_urls",
    "PostStore",
    "InMemoryPostStore",
    "ModerationWorkflow",
]
