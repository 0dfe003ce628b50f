# src/blogcred/verification/verifier.py

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

from blogcred.core.config import ScoringConfig
from blogcred.verification.category import analyze_category_relevance
from blogcred.verification.keywords import analyze_keywords
from blogcred.verification.language import analyze_language
from blogcred.verification.schema import (
    Recommendation,
    SubScores,
    VerificationResult,
    VerifiedSource,
)
from blogcred.verification.sources import analyze_sources
from blogcred.verification.structure import analyze_structure

logger = logging.getLogger(__name__)

VERIFICATION_ERROR_WARNING = "Verification error — manual review required"


class ContentVerifier:
    """
    Rule-based credibility scorer for blog posts.

    Runs the language, source, keyword, structure and category analyzers over
    one article and folds their sub-scores into a weighted score and a
    publication recommendation. Holds no state besides its configuration, so
    a single instance can be shared freely.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        """
        Initialize verifier with scoring parameters.

        Args:
            config: Weights and thresholds (defaults to ScoringConfig())
        """
        self.config = config or ScoringConfig()

    def verify(
        self, title: str, content: str, sources: Sequence[str] = ()
    ) -> VerificationResult:
        """
        Score an article and recommend approve, review or reject.

        Never raises: an analyzer failure yields a review recommendation with
        an explanatory warning.

        Args:
            title: Post title
            content: Post body
            sources: Declared source URLs, in submission order

        Returns:
            A new VerificationResult.
        """
        warnings: List[str] = []
        verified_sources: List[VerifiedSource] = []

        try:
            text = f"{title} {content}"
            sub_scores = SubScores(
                language=analyze_language(text, warnings),
                sources=analyze_sources(
                    sources,
                    warnings,
                    verified_sources,
                    no_source_score=self.config.no_source_score,
                    low_credibility_threshold=self.config.low_credibility_threshold,
                ),
                keywords=analyze_keywords(text, warnings),
                structure=analyze_structure(content, warnings),
                category=analyze_category_relevance(title, content, warnings),
            )
            score = self._combine(sub_scores)
        except Exception as e:
            logger.error(f"Content verification failed, falling back to manual review: {e}")
            warnings.append(VERIFICATION_ERROR_WARNING)
            return VerificationResult(
                is_verified=False,
                score=self.config.review_threshold,
                warnings=tuple(warnings),
                sources=tuple(verified_sources),
                recommendation=Recommendation.REVIEW,
            )

        recommendation = self.recommend(score)
        logger.info(
            f"Verified '{title[:60]}': score={score} recommendation={recommendation.value} "
            f"warnings={len(warnings)}"
        )

        return VerificationResult(
            is_verified=recommendation == Recommendation.APPROVE,
            score=score,
            warnings=tuple(warnings),
            sources=tuple(verified_sources),
            recommendation=recommendation,
            sub_scores=sub_scores,
        )

    def recommend(self, score: int) -> Recommendation:
        """Map an aggregate score to a recommendation."""
        if score >= self.config.approve_threshold:
            return Recommendation.APPROVE
        if score >= self.config.review_threshold:
            return Recommendation.REVIEW
        return Recommendation.REJECT

    def _combine(self, sub_scores: SubScores) -> int:
        """Weighted sum of sub-scores, rounded half up and clamped to [0, 100]."""
        weights = self.config.weights
        weighted = sum(
            Decimal(str(getattr(sub_scores, name))) * Decimal(str(getattr(weights, name)))
            for name in ("language", "sources", "keywords", "structure", "category")
        )
        score = int(weighted.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
        return max(0, min(100, score))


_default_verifier = ContentVerifier()


async def verify_content(
    title: str,
    content: str,
    sources: Sequence[str] = (),
    verifier: Optional[ContentVerifier] = None,
) -> VerificationResult:
    """
    Asynchronous entry point for UI callers.

    The work is synchronous and has no suspension points; the coroutine form
    only lets event-loop callers await it alongside other tasks.
    """
    return (verifier or _default_verifier).verify(title, content, sources)
