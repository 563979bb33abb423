from .checks import (
    Expectation,
    assert_expectations,
    cross_modal_expectations,
    evaluate,
    intra_modal_expectations,
)
from .config import DEFAULT_IMAGE_MODELS, DEFAULT_MODELS, VerifierConfig
from .report import ModelReport
from .runner import EmbeddingSimilarityVerifier

__all__ = [
    "DEFAULT_IMAGE_MODELS",
    "DEFAULT_MODELS",
    "EmbeddingSimilarityVerifier",
    "Expectation",
    "ModelReport",
    "VerifierConfig",
    "assert_expectations",
    "cross_modal_expectations",
    "evaluate",
    "intra_modal_expectations",
]
