# src/blogcred/verification/__init__.py

"""
Credibility verification for blogcred.
Scores articles with fixed, explainable rules over text and static domain lists.
"""

from .schema import Recommendation, SourceType, SubScores, VerificationResult, VerifiedSource
from .lists import TRUSTED_SOURCE_REGISTRY, SUSPICIOUS_KEYWORDS
from .verifier import ContentVerifier, verify_content

__all__ = [
    "ContentVerifier",
    "verify_content",
    "VerificationResult",
    "VerifiedSource",
    "SubScores",
    "Recommendation",
    "SourceType",
    "TRUSTED_SOURCE_REGISTRY",
    "SUSPICIOUS_KEYWORDS",
]
