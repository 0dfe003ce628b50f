# src/blogcred/__init__.py

"""
blogcred
Heuristic credibility scoring and moderation gate for community blog posts.
"""

__version__ = "0.1.0"
__author__ = "blogcred Development Team"

# No direct exports from root; subpackages are accessed explicitly
# e.g., from blogcred.verification import verify_content
