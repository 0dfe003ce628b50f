# src/blogcred/moderation/posts.py

import math
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

_URL_PATTERN = re.compile(r"https?://\S+")


class PostStatus(str, Enum):
    PENDING = "pending"
    PUBLISHED = "published"
    REJECTED = "rejected"


class CommentStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"


class PostDraft(BaseModel):
    """Fields collected by the authoring form."""

    title: str = ""
    content: str = ""
    author: str = ""
    author_email: str = ""
    category: str = ""
    excerpt: str = ""
    tags: List[str] = Field(default_factory=list)
    sources: List[str] = Field(default_factory=list)
    featured: bool = False
    image_url: Optional[str] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        if isinstance(v, str):
            return parse_tags(v)
        return v

    @field_validator("sources", mode="before")
    @classmethod
    def split_sources(cls, v):
        if isinstance(v, str):
            return parse_sources(v)
        return v

    def missing_fields(self) -> List[str]:
        """Names of required fields that are blank."""
        required = ("title", "content", "author", "author_email")
        return [name for name in required if not getattr(self, name).strip()]


def parse_sources(text: str) -> List[str]:
    """Split the one-per-line sources field, dropping blank lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def parse_tags(text: str) -> List[str]:
    """Split a comma-separated tag field, dropping empty tags."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def extract_urls(content: str) -> List[str]:
    """Return http(s) URLs embedded in free text, in order of appearance."""
    return _URL_PATTERN.findall(content)


def make_excerpt(content: str, length: int = 150) -> str:
    return content[:length] + "..."


def estimate_read_time(content: str, words_per_minute: int = 200) -> int:
    """Reading time in whole minutes, never less than one."""
    word_count = len(content.split())
    return max(1, math.ceil(word_count / words_per_minute))
