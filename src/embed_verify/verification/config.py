# src/embed_verify/verification/config.py

from collections.abc import Mapping
from dataclasses import dataclass, field

MULTILINGUAL_TEXT_MODEL = "sentence-transformers/clip-ViT-B-32-multilingual-v1"

DEFAULT_MODELS = (
    "sentence-transformers/clip-ViT-B-32",
    "sentence-transformers/clip-ViT-B-16",
    "sentence-transformers/clip-ViT-L-14",
    MULTILINGUAL_TEXT_MODEL,
)

# Text-only models and the image model whose embedding space they share.
DEFAULT_IMAGE_MODELS = {
    MULTILINGUAL_TEXT_MODEL: "sentence-transformers/clip-ViT-B-32",
}


@dataclass(frozen=True)
class VerifierConfig:
    """Configuration for a verification run.

    Immutable. Explicit. The hub token is resolved by the caller,
    see ``embed_verify.credentials.resolve_hf_token``.

    Each entry of ``models`` names the text model. Models listed in
    ``image_models`` take their image side from the mapped model; all
    others encode images with the same model.
    """

    models: tuple[str, ...] = DEFAULT_MODELS
    image_models: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_IMAGE_MODELS)
    )
    token: str | None = None
    fail_fast: bool = True  # Stop at the first model that errors
    normalize: bool = False
    image_timeout: float = 30.0
    device: str | None = None
    cache_folder: str | None = None

    def image_model_for(self, model: str) -> str:
        return self.image_models.get(model, model)
