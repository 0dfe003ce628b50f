# tests/unit/test_posts.py

import pytest

from blogcred.core.errors import PostNotFound
from blogcred.moderation.posts import (
    PostDraft,
    estimate_read_time,
    extract_urls,
    make_excerpt,
    parse_sources,
    parse_tags,
)
from blogcred.moderation.store import InMemoryPostStore


class TestAuthoringHelpers:
    """Test parsing of the authoring form fields."""

    def test_parse_sources(self):
        text = "https://arxiv.org/abs/1\n\n   \n  www.cert.br/docs  \n"
        assert parse_sources(text) == ["https://arxiv.org/abs/1", "www.cert.br/docs"]

    def test_parse_tags(self):
        assert parse_tags("python, segurança,, ,lgpd") == ["python", "segurança", "lgpd"]

    def test_extract_urls(self):
        content = "Veja https://cert.br/docs e também http://example.com/a?b=1 hoje"
        assert extract_urls(content) == ["https://cert.br/docs", "http://example.com/a?b=1"]

    def test_excerpt_and_read_time(self):
        content = "palavra " * 450
        assert make_excerpt(content) == content[:150] + "..."
        assert estimate_read_time(content) == 3
        assert estimate_read_time("") == 1

    def test_draft_accepts_form_strings(self):
        draft = PostDraft(
            title="t", content="c", tags="a, b", sources="https://x.org\n\nhttps://y.org"
        )
        assert draft.tags == ["a", "b"]
        assert draft.sources == ["https://x.org", "https://y.org"]
        assert draft.missing_fields() == ["author", "author_email"]


class TestInMemoryPostStore:
    """Test the in-memory record store."""

    def test_create_and_get(self):
        store = InMemoryPostStore()
        created = store.create("posts", {"title": "a"})
        assert created["_id"]
        assert store.get("posts", created["_id"])["title"] == "a"
        assert store.get("posts", "missing") is None

    def test_returned_records_are_copies(self):
        store = InMemoryPostStore()
        created = store.create("posts", {"tags": ["a"]})
        created["tags"].append("b")
        assert store.get("posts", created["_id"])["tags"] == ["a"]

    def test_list_filter_sort_limit(self):
        store = InMemoryPostStore()
        for i, status in enumerate(["published", "pending", "published", "published"]):
            store.create("posts", {"n": i, "status": status})

        records = store.list(
            "posts", filter={"status": "published"}, sort=("n", True), limit=2
        )
        assert [r["n"] for r in records] == [3, 2]

    def test_update_unknown_record(self):
        store = InMemoryPostStore()
        with pytest.raises(PostNotFound):
            store.update("posts", "missing", {"status": "published"})
