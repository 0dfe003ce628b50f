# src/blogcred/moderation/workflow.py

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from blogcred.core.config import ModerationConfig
from blogcred.core.errors import PostNotFound, PublicationRefused
from blogcred.moderation.posts import (
    CommentStatus,
    PostDraft,
    PostStatus,
    estimate_read_time,
    extract_urls,
    make_excerpt,
)
from blogcred.moderation.store import PostStore, Record
from blogcred.verification.schema import Recommendation, VerificationResult
from blogcred.verification.verifier import ContentVerifier

logger = logging.getLogger(__name__)

POSTS = "posts"
COMMENTS = "comments"


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class ModerationWorkflow:
    """
    Publication gate and moderation queue for blog posts.

    Approved content is published directly, content flagged for review waits
    in the pending queue, and rejected content is refused outright.
    """

    def __init__(
        self,
        store: PostStore,
        verifier: Optional[ContentVerifier] = None,
        config: Optional[ModerationConfig] = None,
        clock: Callable[[], str] = _utcnow,
    ):
        """
        Initialize the workflow.

        Args:
            store: Backing record store
            verifier: Credibility scorer (defaults to ContentVerifier())
            config: Excerpt, read-time and image defaults
            clock: Returns the current time as an ISO 8601 string
        """
        self.store = store
        self.verifier = verifier or ContentVerifier()
        self.config = config or ModerationConfig()
        self.clock = clock

    def submit_post(self, draft: PostDraft) -> Record:
        """
        Verify a draft and store it as published or pending.

        Raises:
            PublicationRefused: If required fields are blank or the content
                was rejected by the verifier.
        """
        missing = draft.missing_fields()
        if missing:
            raise PublicationRefused(f"Missing required fields: {', '.join(missing)}")

        result = self.verifier.verify(draft.title, draft.content, draft.sources)
        if result.recommendation == Recommendation.REJECT:
            logger.warning(
                f"Refused publication of '{draft.title}' (score {result.score})"
            )
            raise PublicationRefused(
                "Content failed credibility verification", result=result
            )

        now = self.clock()
        approved = result.recommendation == Recommendation.APPROVE
        record: Record = {
            "title": draft.title,
            "excerpt": draft.excerpt
            or make_excerpt(draft.content, self.config.excerpt_length),
            "content": draft.content,
            "category": draft.category,
            "tags": list(draft.tags),
            "sources": list(draft.sources),
            "author": draft.author,
            "author_email": draft.author_email,
            "status": (PostStatus.PUBLISHED if approved else PostStatus.PENDING).value,
            "featured": draft.featured,
            "image_url": draft.image_url or self.config.default_image_url,
            "read_time": estimate_read_time(draft.content, self.config.words_per_minute),
            "views": 0,
            "likes": 0,
            "verification_score": result.score,
            "verification_result": result.model_dump(mode="json"),
            "created_at": now,
            "updated_at": now,
            "published_at": now if approved else None,
        }
        post = self.store.create(POSTS, record)

        if approved:
            logger.info(f"Post {post['_id']} created and published")
        else:
            logger.info(f"Post {post['_id']} sent to moderation")
        return post

    def pending_posts(self) -> List[Record]:
        return self.store.list(
            POSTS, filter={"status": PostStatus.PENDING.value}, sort=("created_at", True)
        )

    def published_posts(
        self,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> List[Record]:
        """Published posts, latest publication first, optionally filtered."""
        query: Record = {"status": PostStatus.PUBLISHED.value}
        if category is not None:
            query["category"] = category
        if featured is not None:
            query["featured"] = featured
        return self.store.list(
            POSTS, filter=query, sort=("published_at", True), limit=limit
        )

    def reverify(self, post_id: str) -> VerificationResult:
        """
        Re-score a stored post using the URLs found in its body.

        The post's status is left untouched; moderators decide separately.
        """
        post = self._get_post(post_id)
        sources = extract_urls(post["content"])
        return self.verifier.verify(post["title"], post["content"], sources)

    def approve(self, post_id: str) -> Record:
        self._get_post(post_id)
        now = self.clock()
        post = self.store.update(
            POSTS,
            post_id,
            {"status": PostStatus.PUBLISHED.value, "published_at": now, "updated_at": now},
        )
        logger.info(f"Post {post_id} approved and published")
        return post

    def reject(self, post_id: str, reason: str) -> Record:
        self._get_post(post_id)
        post = self.store.update(
            POSTS,
            post_id,
            {
                "status": PostStatus.REJECTED.value,
                "rejection_reason": reason,
                "updated_at": self.clock(),
            },
        )
        logger.info(f"Post {post_id} rejected: {reason}")
        return post

    def register_view(self, post_id: str) -> Record:
        post = self._get_post(post_id)
        return self.store.update(POSTS, post_id, {"views": post.get("views", 0) + 1})

    def toggle_like(self, post_id: str, liked: bool) -> Record:
        """Add a like, or remove one when the reader had already liked the post."""
        post = self._get_post(post_id)
        likes = post.get("likes", 0)
        likes = max(0, likes - 1) if liked else likes + 1
        return self.store.update(POSTS, post_id, {"likes": likes})

    def add_comment(
        self, post_id: str, content: str, author: str, author_email: str
    ) -> Record:
        """
        Queue a reader comment for moderation.

        Raises:
            PublicationRefused: If any field is blank.
            PostNotFound: If the post does not exist.
        """
        if not content.strip() or not author.strip() or not author_email.strip():
            raise PublicationRefused("Comment content, author and email are required")
        self._get_post(post_id)

        now = self.clock()
        comment = self.store.create(
            COMMENTS,
            {
                "post_id": post_id,
                "content": content,
                "author": author,
                "author_email": author_email,
                "status": CommentStatus.PENDING.value,
                "likes": 0,
                "created_at": now,
                "updated_at": now,
            },
        )
        logger.info(f"Comment {comment['_id']} on post {post_id} sent to moderation")
        return comment

    def approve_comment(self, comment_id: str) -> Record:
        if self.store.get(COMMENTS, comment_id) is None:
            raise PostNotFound(comment_id)
        return self.store.update(
            COMMENTS,
            comment_id,
            {"status": CommentStatus.APPROVED.value, "updated_at": self.clock()},
        )

    def approved_comments(self, post_id: str) -> List[Record]:
        return self.store.list(
            COMMENTS,
            filter={"post_id": post_id, "status": CommentStatus.APPROVED.value},
            sort=("created_at", True),
        )

    def _get_post(self, post_id: str) -> Record:
        post = self.store.get(POSTS, post_id)
        if post is None:
            raise PostNotFound(post_id)
        return post
