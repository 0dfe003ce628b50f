# tests/unit/test_packaging.py

from pathlib import Path

SETUP_PY = Path(__file__).resolve().parents[2] / "setup.py"


class TestPackaging:
    """Test installation metadata."""

    def test_no_placeholder_urls(self):
        """setup.py carries no template repository links."""
        text = SETUP_PY.read_text(encoding="utf-8")
        assert "your-org" not in text
        assert "project_urls" not in text

    def test_console_script_declared(self):
        text = SETUP_PY.read_text(encoding="utf-8")
        assert "blogcred-verify=scripts.blogcred_verify:main" in text
