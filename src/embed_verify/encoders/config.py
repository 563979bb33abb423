# src/embed_verify/encoders/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["local"]


@dataclass(frozen=True)
class EncoderConfig:
    """Configuration for loading an encoder pair from the model hub.

    Immutable. Explicit. The token is resolved by the caller.
    """

    model: str
    provider: Provider = "local"
    token: str | None = None
    device: str | None = None  # None lets sentence-transformers pick
    cache_folder: str | None = None
    normalize: bool = False  # L2-normalize vectors before returning them
