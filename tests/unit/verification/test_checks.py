import pytest

from embed_verify.encoders.base import Embedding
from embed_verify.exceptions import DimensionMismatchError, OrderingViolationError
from embed_verify.verification import (
    Expectation,
    assert_expectations,
    cross_modal_expectations,
    evaluate,
    intra_modal_expectations,
)


def _embeddings(*vectors: tuple[float, ...]) -> list[Embedding]:
    return [Embedding(vector=v) for v in vectors]


def _matched_pairs(n: int) -> tuple[list[Embedding], list[Embedding]]:
    texts = [tuple(0.8 if k == i else 0.1 for k in range(n)) for i in range(n)]
    images = [tuple(1.0 if k == i else 0.1 for k in range(n)) for i in range(n)]
    return _embeddings(*texts), _embeddings(*images)


class TestExpectation:
    def test_holds_only_when_strictly_greater(self) -> None:
        assert Expectation("a", higher=0.5, lower=0.4).holds
        assert not Expectation("b", higher=0.4, lower=0.4).holds
        assert not Expectation("c", higher=0.3, lower=0.4).holds


class TestIntraModal:
    def test_related_texts_pass(self) -> None:
        embeddings = _embeddings(
            (1.0, 0.1, 0.0), (0.9, 0.2, 0.1), (0.1, 1.0, 0.0), (0.2, 0.9, 0.3)
        )

        expectations = intra_modal_expectations(embeddings)

        assert len(expectations) == 2
        assert evaluate(expectations) == []
        assert_expectations(expectations)

    def test_both_violations_are_reported(self) -> None:
        # Every text points the same way, so nothing beats the cross pair.
        embeddings = _embeddings((1.0, 0.0), (1.0, 0.0), (1.0, 0.0), (1.0, 0.0))

        with pytest.raises(OrderingViolationError) as exc_info:
            assert_expectations(intra_modal_expectations(embeddings))

        message = str(exc_info.value)
        assert len(exc_info.value.violations) == 2
        assert "items 0 and 1" in message
        assert "items 2 and 3" in message

    def test_only_failing_pair_is_reported(self) -> None:
        embeddings = _embeddings((1.0, 0.0), (0.0, 1.0), (0.7, 0.7), (0.6, 0.8))

        violations = evaluate(intra_modal_expectations(embeddings))

        assert [v.label for v in violations] == [
            "items 0 and 1 should be more similar to each other than items 0 and 2"
        ]

    def test_custom_pairs(self) -> None:
        embeddings = _embeddings((1.0, 0.0), (0.0, 1.0), (0.1, 1.0), (0.9, 0.1))

        expectations = intra_modal_expectations(
            embeddings, within=((0, 3), (1, 2)), across=(0, 1)
        )

        assert evaluate(expectations) == []

    def test_is_assertion_error(self) -> None:
        embeddings = _embeddings((1.0, 0.0), (0.0, 1.0), (1.0, 0.0), (0.0, 1.0))

        with pytest.raises(AssertionError):
            assert_expectations(intra_modal_expectations(embeddings))

    def test_dimension_mismatch_propagates(self) -> None:
        embeddings = _embeddings((1.0, 0.0), (1.0, 0.0, 0.0), (1.0, 0.0), (1.0, 0.0))

        with pytest.raises(DimensionMismatchError):
            intra_modal_expectations(embeddings)


class TestCrossModal:
    def test_matched_pairs_pass_all_forty_comparisons(self) -> None:
        texts, images = _matched_pairs(5)

        expectations = cross_modal_expectations(texts, images)

        assert len(expectations) == 40
        assert evaluate(expectations) == []

    def test_swapped_images_fail_in_both_directions(self) -> None:
        texts, images = _matched_pairs(5)
        images[0], images[1] = images[1], images[0]

        violations = evaluate(cross_modal_expectations(texts, images))
        labels = {v.label for v in violations}

        assert "text 0 should be more similar to image 0 than to image 1" in labels
        assert "image 1 should be more similar to text 1 than to text 0" in labels
        assert all(
            v.label.split()[1] in {"0", "1"} for v in violations
        )

    def test_ties_are_violations(self) -> None:
        texts = _embeddings((1.0, 0.0), (1.0, 0.0))
        images = _embeddings((1.0, 0.0), (1.0, 0.0))

        violations = evaluate(cross_modal_expectations(texts, images))

        assert len(violations) == 4

    def test_single_pair_has_no_expectations(self) -> None:
        texts, images = _matched_pairs(1)
        assert cross_modal_expectations(texts, images) == []

    def test_length_mismatch_raises(self) -> None:
        texts, images = _matched_pairs(3)

        with pytest.raises(ValueError, match="one image per text"):
            cross_modal_expectations(texts, images[:2])
