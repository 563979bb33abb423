# Credentials
from .credentials import resolve_hf_token

# Encoders
from .encoders import (
    Embedding,
    EncoderConfig,
    ImageEncoder,
    TextEncoder,
    load_image_encoder,
    load_text_encoder,
)

# Errors
from .exceptions import (
    DimensionMismatchError,
    EmbedVerifyError,
    ImageLoadError,
    OrderingViolationError,
)

# Images
from .images import ImageLoader

# Observability
from .observability import MetricsHook, NoOpMetricsHook, RecordingMetricsHook

# Samples
from .samples import SampleLibrary, SamplePair, SampleSet

# Similarity
from .similarity import cosine_similarity, similarity_matrix

# Verification
from .verification import (
    EmbeddingSimilarityVerifier,
    Expectation,
    ModelReport,
    VerifierConfig,
    assert_expectations,
    cross_modal_expectations,
    intra_modal_expectations,
)

__all__ = [
    # Credentials
    "resolve_hf_token",
    # Encoders
    "Embedding",
    "EncoderConfig",
    "ImageEncoder",
    "TextEncoder",
    "load_image_encoder",
    "load_text_encoder",
    # Errors
    "DimensionMismatchError",
    "EmbedVerifyError",
    "ImageLoadError",
    "OrderingViolationError",
    # Images
    "ImageLoader",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    "RecordingMetricsHook",
    # Samples
    "SampleLibrary",
    "SamplePair",
    "SampleSet",
    # Similarity
    "cosine_similarity",
    "similarity_matrix",
    # Verification
    "EmbeddingSimilarityVerifier",
    "Expectation",
    "ModelReport",
    "VerifierConfig",
    "assert_expectations",
    "cross_modal_expectations",
    "intra_modal_expectations",
]
