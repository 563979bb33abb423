from .base import Embedding, ImageEncoder, TextEncoder
from .config import EncoderConfig
from .factory import load_image_encoder, load_text_encoder

__all__ = [
    "Embedding",
    "EncoderConfig",
    "ImageEncoder",
    "TextEncoder",
    "load_image_encoder",
    "load_text_encoder",
]
