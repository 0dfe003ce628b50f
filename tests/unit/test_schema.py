# tests/unit/test_schema.py

import json

import pytest
from pydantic import ValidationError

from blogcred.verification.schema import (
    Recommendation,
    SourceType,
    VerificationResult,
    VerifiedSource,
)
from blogcred.verification.verifier import ContentVerifier


class TestVerificationSchema:
    """Test result model validation and immutability."""

    def test_source_domain_normalized(self):
        source = VerifiedSource(
            url="https://Arxiv.org/abs/1",
            domain=" Arxiv.org ",
            credibility_score=95,
            type=SourceType.ACADEMIC,
        )
        assert source.domain == "arxiv.org"

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds(self, score):
        with pytest.raises(ValidationError):
            VerificationResult(score=score)
        with pytest.raises(ValidationError):
            VerifiedSource(url="x", domain="x", credibility_score=score)

    def test_recommendation_is_closed(self):
        with pytest.raises(ValidationError):
            VerificationResult(score=50, recommendation="publish")

    def test_result_is_frozen(self):
        result = VerificationResult(score=90, recommendation=Recommendation.APPROVE)
        with pytest.raises(ValidationError):
            result.score = 10

    def test_result_collections_are_immutable(self):
        """Warnings, sources and sub-scores cannot be changed in place."""
        result = ContentVerifier().verify("t", "c", ["https://arxiv.org/abs/1"])

        assert isinstance(result.warnings, tuple)
        assert isinstance(result.sources, tuple)
        with pytest.raises(AttributeError):
            result.warnings.append("injected")
        with pytest.raises(AttributeError):
            result.sources.append(None)
        with pytest.raises(ValidationError):
            result.sub_scores.language = 0
        with pytest.raises(ValidationError):
            result.sources[0].credibility_score = 0

    def test_lists_are_coerced_to_tuples(self):
        result = VerificationResult(score=50, warnings=["a", "b"])
        assert result.warnings == ("a", "b")

    def test_json_serialization(self):
        result = VerificationResult(
            is_verified=True,
            score=95,
            sources=[
                VerifiedSource(
                    url="https://arxiv.org/abs/1",
                    domain="arxiv.org",
                    credibility_score=95,
                    type=SourceType.ACADEMIC,
                )
            ],
            recommendation=Recommendation.APPROVE,
        )
        data = json.loads(result.model_dump_json())
        assert data["recommendation"] == "approve"
        assert data["sources"][0]["type"] == "academic"
