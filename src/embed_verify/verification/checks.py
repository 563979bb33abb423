# src/embed_verify/verification/checks.py

"""Relative-ordering checks over precomputed embeddings.

Checks are purely ordinal: an expectation holds when one similarity is
strictly greater than another. No tolerance is applied.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from embed_verify.encoders.base import Embedding
from embed_verify.exceptions import OrderingViolationError
from embed_verify.similarity import cosine_similarity, similarity_matrix


@dataclass(frozen=True)
class Expectation:
    label: str
    higher: float
    lower: float

    @property
    def holds(self) -> bool:
        return self.higher > self.lower


def intra_modal_expectations(
    embeddings: Sequence[Embedding],
    within: tuple[tuple[int, int], tuple[int, int]] = ((0, 1), (2, 3)),
    across: tuple[int, int] = (0, 2),
) -> list[Expectation]:
    """Each within-topic pair must be closer than the cross-topic pair."""
    cross = _similarity(embeddings, across)
    return [
        Expectation(
            label=(
                f"items {i} and {j} should be more similar to each other "
                f"than items {across[0]} and {across[1]}"
            ),
            higher=_similarity(embeddings, (i, j)),
            lower=cross,
        )
        for i, j in within
    ]


def cross_modal_expectations(
    text_embeddings: Sequence[Embedding],
    image_embeddings: Sequence[Embedding],
) -> list[Expectation]:
    """Every matched (text_i, image_i) pair must be a mutual nearest neighbour.

    Produces ``n * (n - 1) * 2`` expectations for ``n`` pairs.
    """
    if len(text_embeddings) != len(image_embeddings):
        raise ValueError(
            f"Need one image per text, got {len(text_embeddings)} texts "
            f"and {len(image_embeddings)} images"
        )

    # scores[t][i] = cos(text_t, image_i)
    scores = similarity_matrix(
        [e.vector for e in text_embeddings],
        [e.vector for e in image_embeddings],
    )
    n = len(scores)
    expectations: list[Expectation] = []
    for i in range(n):
        for j in range(n):
            if j == i:
                continue
            expectations.append(
                Expectation(
                    label=f"text {i} should be more similar to image {i} than to image {j}",
                    higher=scores[i][i],
                    lower=scores[i][j],
                )
            )
            expectations.append(
                Expectation(
                    label=f"image {i} should be more similar to text {i} than to text {j}",
                    higher=scores[i][i],
                    lower=scores[j][i],
                )
            )
    return expectations


def evaluate(expectations: Iterable[Expectation]) -> list[Expectation]:
    """Return the expectations that do not hold."""
    return [e for e in expectations if not e.holds]


def assert_expectations(expectations: Iterable[Expectation]) -> None:
    """Check every expectation and raise once, naming all violations.

    Raises:
        OrderingViolationError: If any expectation does not hold.
    """
    violations = evaluate(expectations)
    if violations:
        raise OrderingViolationError(violations)


def _similarity(embeddings: Sequence[Embedding], pair: tuple[int, int]) -> float:
    return cosine_similarity(embeddings[pair[0]].vector, embeddings[pair[1]].vector)
