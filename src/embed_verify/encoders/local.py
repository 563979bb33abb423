# src/embed_verify/encoders/local.py

from __future__ import annotations

import asyncio
import logging
from functools import lru_cache
from time import monotonic
from typing import Any

from PIL.Image import Image
from sentence_transformers import SentenceTransformer

from embed_verify.observability import names
from embed_verify.observability.base import MetricsHook, NoOpMetricsHook

from .base import Embedding, ImageEncoder, TextEncoder
from .config import EncoderConfig

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _load_model(
    model_name: str,
    token: str | None,
    device: str | None,
    cache_folder: str | None,
) -> SentenceTransformer:
    # Only the most recent model stays resident, so text and image handles of
    # one model share weights while iterating models one at a time.
    return SentenceTransformer(
        model_name,
        device=device,
        cache_folder=cache_folder,
        token=token,
    )


async def load_model(
    config: EncoderConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> SentenceTransformer:
    """Fetch (or reuse) a sentence-transformers model without blocking the loop."""
    start = monotonic()
    logger.info("Loading model %s", config.model)
    model = await asyncio.to_thread(
        _load_model,
        config.model,
        config.token,
        config.device,
        config.cache_folder,
    )
    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(
        names.ENCODER_LOAD_DURATION, elapsed_ms, labels={"model": config.model}
    )
    metrics_hook.increment(names.ENCODER_LOADS_TOTAL, labels={"model": config.model})
    logger.info("Loaded model %s in %.0f ms", config.model, elapsed_ms)
    return model


class _LocalEncoder:
    modality = "unknown"

    def __init__(
        self,
        model: SentenceTransformer,
        model_name: str,
        normalize: bool = False,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._model = model
        self._normalize = normalize
        self.model_name = model_name
        self.metrics_hook = metrics_hook

    async def _encode_one(self, item: Any) -> Embedding:
        start = monotonic()
        # Use to_thread to avoid blocking event loop with CPU-bound work
        vectors = await asyncio.to_thread(
            self._model.encode,
            [item],
            convert_to_numpy=True,
            normalize_embeddings=self._normalize,
            show_progress_bar=False,
        )
        embedding = Embedding(vector=tuple(float(x) for x in vectors[0]))

        labels = {"model": self.model_name, "modality": self.modality}
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ENCODE_DURATION, elapsed_ms, labels=labels)
        self.metrics_hook.increment(names.ENCODE_REQUESTS_TOTAL, labels=labels)
        self.metrics_hook.record_gauge(
            names.EMBEDDING_DIMENSION, embedding.dimension, labels=labels
        )
        return embedding


class LocalTextEncoder(_LocalEncoder, TextEncoder):
    """Text side of a sentence-transformers CLIP-style model."""

    modality = "text"

    async def encode(self, text: str) -> Embedding:
        logger.debug("Encoding text with %s: %.40s", self.model_name, text)
        return await self._encode_one(text)


class LocalImageEncoder(_LocalEncoder, ImageEncoder):
    """Image side of a sentence-transformers CLIP-style model."""

    modality = "image"

    async def encode(self, image: Image) -> Embedding:
        logger.debug("Encoding %sx%s image with %s", *image.size, self.model_name)
        return await self._encode_one(image)
