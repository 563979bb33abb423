from collections.abc import Callable

import pytest
from PIL import Image

from embed_verify.encoders.base import Embedding
from embed_verify.exceptions import ImageLoadError
from embed_verify.observability.base import NoOpMetricsHook
from embed_verify.samples import CAPTIONED_IMAGES, SCENIC_TEXTS, SampleLibrary

SCENIC_VECTORS = [
    (1.0, 0.1, 0.0),
    (0.9, 0.2, 0.1),
    (0.1, 1.0, 0.0),
    (0.2, 0.9, 0.3),
]


def one_hot(i: int, n: int, scale: float = 1.0) -> tuple[float, ...]:
    return tuple(scale if k == i else 0.1 for k in range(n))


class FakeTextEncoder:
    def __init__(self, model_name: str, vectors: dict[str, tuple[float, ...]]) -> None:
        self.model_name = model_name
        self.metrics_hook = NoOpMetricsHook()
        self.vectors = vectors
        self.calls: list[str] = []

    async def encode(self, text: str) -> Embedding:
        self.calls.append(text)
        return Embedding(vector=self.vectors[text])


class FakeImageEncoder:
    def __init__(self, model_name: str, vectors: dict[str, tuple[float, ...]]) -> None:
        self.model_name = model_name
        self.metrics_hook = NoOpMetricsHook()
        self.vectors = vectors

    async def encode(self, image: Image.Image) -> Embedding:
        return Embedding(vector=self.vectors[image.info["url"]])


class FakeImageLoader:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.fetched: list[str] = []

    async def fetch(self, url: str) -> Image.Image:
        self.fetched.append(url)
        if url in self.failing:
            raise ImageLoadError(url, "HTTP 404")
        image = Image.new("RGB", (2, 2))
        image.info["url"] = url
        return image

    async def aclose(self) -> None:
        pass


@pytest.fixture
def library() -> SampleLibrary:
    return SampleLibrary()


@pytest.fixture
def text_vectors(library: SampleLibrary) -> dict[str, tuple[float, ...]]:
    """Text vectors that satisfy both the intra- and cross-modal checks."""
    scenic = library.get(SCENIC_TEXTS).texts
    captions = library.get(CAPTIONED_IMAGES).texts
    vectors = {text: v + (0.0,) * 2 for text, v in zip(scenic, SCENIC_VECTORS)}
    vectors.update(
        {text: one_hot(i, len(captions), 0.8) for i, text in enumerate(captions)}
    )
    return vectors


@pytest.fixture
def image_vectors(library: SampleLibrary) -> dict[str, tuple[float, ...]]:
    urls = library.get(CAPTIONED_IMAGES).image_urls
    return {url: one_hot(i, len(urls)) for i, url in enumerate(urls) if url}


@pytest.fixture
def make_encoders(
    text_vectors: dict[str, tuple[float, ...]],
    image_vectors: dict[str, tuple[float, ...]],
) -> Callable[..., tuple[FakeTextEncoder, FakeImageEncoder]]:
    def _make(model_name: str = "fake-model") -> tuple[FakeTextEncoder, FakeImageEncoder]:
        return (
            FakeTextEncoder(model_name, dict(text_vectors)),
            FakeImageEncoder(model_name, dict(image_vectors)),
        )

    return _make


@pytest.fixture
def make_image_loader() -> Callable[..., FakeImageLoader]:
    return FakeImageLoader
