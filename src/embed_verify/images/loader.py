"""Remote image fetching for image-encoder samples."""

from __future__ import annotations

import io
import logging
from time import monotonic
from types import TracebackType

import httpx
from PIL import Image, UnidentifiedImageError

from embed_verify.exceptions import ImageLoadError
from embed_verify.observability import names
from embed_verify.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class ImageLoader:
    """Downloads images over HTTP(S) and decodes them with Pillow.

    Owns a single ``httpx.AsyncClient`` unless one is injected. Use as an
    async context manager, or call :meth:`aclose` when done.

    Example:
        >>> async with ImageLoader() as loader:
        ...     image = await loader.fetch("https://example.com/cat.jpg")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=timeout, follow_redirects=True
        )
        self.metrics_hook = metrics_hook

    async def fetch(self, url: str) -> Image.Image:
        """Fetch ``url`` and return it as an RGB image.

        Raises:
            ImageLoadError: On transport errors, non-2xx responses or
                payloads Pillow cannot decode. The error names ``url``.
        """
        start = monotonic()
        logger.debug("Fetching image %s", url)
        try:
            image = await self._fetch(url)
        except ImageLoadError as e:
            self.metrics_hook.increment(names.IMAGE_FETCH_ERRORS_TOTAL)
            logger.error("Image fetch failed: %s", e)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.IMAGE_FETCH_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.IMAGE_FETCH_TOTAL)
        logger.debug("Fetched %sx%s image from %s", *image.size, url)
        return image

    async def _fetch(self, url: str) -> Image.Image:
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ImageLoadError(url, f"HTTP {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ImageLoadError(url, str(e) or type(e).__name__) from e

        try:
            image = Image.open(io.BytesIO(response.content))
            image.load()
        except (UnidentifiedImageError, OSError) as e:
            raise ImageLoadError(url, "payload is not a decodable image") from e

        return image.convert("RGB")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ImageLoader:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
