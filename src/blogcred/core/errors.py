# src/blogcred/core/errors.py

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from blogcred.verification.schema import VerificationResult


class BlogCredError(Exception):
    """Base class for application-level errors."""


class PublicationRefused(BlogCredError):
    """Raised when a post cannot be submitted for publication."""

    def __init__(self, message: str, result: Optional["VerificationResult"] = None):
        super().__init__(message)
        self.result = result


class PostNotFound(BlogCredError):
    """Raised when a moderation action targets an unknown post."""

    def __init__(self, post_id: str):
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id
