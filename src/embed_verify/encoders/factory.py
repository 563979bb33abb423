# src/embed_verify/encoders/factory.py

from embed_verify.observability.base import MetricsHook, NoOpMetricsHook

from .base import ImageEncoder, TextEncoder
from .config import EncoderConfig


async def load_text_encoder(
    config: EncoderConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> TextEncoder:
    """Load the text encoder for ``config.model``.

    May download model artifacts from the hub on first use.

    Raises:
        ValueError: If provider is unknown.
    """
    if config.provider == "local":
        from .local import LocalTextEncoder, load_model

        model = await load_model(config, metrics_hook)
        return LocalTextEncoder(
            model, config.model, normalize=config.normalize, metrics_hook=metrics_hook
        )

    raise ValueError(f"Unknown encoder provider: {config.provider}")


async def load_image_encoder(
    config: EncoderConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ImageEncoder:
    """Load the image encoder for ``config.model``.

    Raises:
        ValueError: If provider is unknown.
    """
    if config.provider == "local":
        from .local import LocalImageEncoder, load_model

        model = await load_model(config, metrics_hook)
        return LocalImageEncoder(
            model, config.model, normalize=config.normalize, metrics_hook=metrics_hook
        )

    raise ValueError(f"Unknown encoder provider: {config.provider}")
