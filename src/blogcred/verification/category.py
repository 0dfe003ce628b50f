# src/blogcred/verification/category.py

import logging
from typing import List

from blogcred.verification.lists import CATEGORY_KEYWORDS

logger = logging.getLogger(__name__)

# Hits needed in a single category before the topic counts as established
RELEVANCE_THRESHOLD = 2
MISCATEGORIZED_SCORE = 70


def analyze_category_relevance(title: str, content: str, warnings: List[str]) -> int:
    """Return 100 when any blog category has enough keyword hits, else 70."""
    text = f"{title} {content}".lower()

    for category, keywords in CATEGORY_KEYWORDS.items():
        hits = sum(1 for keyword in keywords if keyword in text)
        if hits >= RELEVANCE_THRESHOLD:
            logger.debug(f"Category relevance established for '{category}' ({hits} hits)")
            return 100

    warnings.append("Content may be miscategorized")
    return MISCATEGORIZED_SCORE
