from dataclasses import dataclass
from typing import Protocol

from PIL.Image import Image

from embed_verify.observability.base import MetricsHook


@dataclass(frozen=True)
class Embedding:
    vector: tuple[float, ...]

    @property
    def dimension(self) -> int:
        return len(self.vector)


class TextEncoder(Protocol):
    model_name: str
    metrics_hook: MetricsHook

    async def encode(self, text: str) -> Embedding: ...


class ImageEncoder(Protocol):
    model_name: str
    metrics_hook: MetricsHook

    async def encode(self, image: Image) -> Embedding: ...
