# src/embed_verify/verification/runner.py

from __future__ import annotations

import logging
from time import monotonic
from types import TracebackType

from embed_verify.encoders import (
    Embedding,
    EncoderConfig,
    load_image_encoder,
    load_text_encoder,
)
from embed_verify.exceptions import DimensionMismatchError
from embed_verify.images import ImageLoader
from embed_verify.observability import names
from embed_verify.observability.base import MetricsHook, NoOpMetricsHook
from embed_verify.samples import CAPTIONED_IMAGES, SCENIC_TEXTS, SampleLibrary

from .checks import (
    Expectation,
    cross_modal_expectations,
    evaluate,
    intra_modal_expectations,
)
from .config import VerifierConfig
from .report import ModelReport

logger = logging.getLogger(__name__)


class EmbeddingSimilarityVerifier:
    """Checks that encoders rank related items above unrelated ones.

    Everything runs sequentially on one task: models one after another,
    samples one after another, one await per encode.

    Example:
        >>> config = VerifierConfig(token=resolve_hf_token())
        >>> async with EmbeddingSimilarityVerifier(config) as verifier:
        ...     reports = await verifier.verify_models()
    """

    def __init__(
        self,
        config: VerifierConfig = VerifierConfig(),
        samples: SampleLibrary | None = None,
        image_loader: ImageLoader | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config
        self.metrics_hook = metrics_hook
        self._samples = samples or SampleLibrary()
        self._owns_loader = image_loader is None
        self._image_loader = image_loader or ImageLoader(
            timeout=config.image_timeout, metrics_hook=metrics_hook
        )
        logger.info(
            "Initialized EmbeddingSimilarityVerifier with %d models, fail_fast=%s",
            len(config.models),
            config.fail_fast,
        )

    async def verify_text_embeddings(self, model: str) -> list[Expectation]:
        """Encode the scenic texts and build the intra-modal expectations."""
        sample_set = self._samples.get(SCENIC_TEXTS)
        text_encoder = await load_text_encoder(self._encoder_config(model), self.metrics_hook)

        embeddings: list[Embedding] = []
        for text in sample_set.texts:
            embeddings.append(await text_encoder.encode(text))

        return intra_modal_expectations(embeddings)

    async def verify_image_embeddings(self, model: str) -> list[Expectation]:
        """Encode captioned images and build the cross-modal expectations.

        Raises:
            ImageLoadError: If any sample image cannot be fetched.
            ValueError: If a sample has no image URL.
        """
        sample_set = self._samples.get(CAPTIONED_IMAGES)
        text_encoder = await load_text_encoder(self._encoder_config(model), self.metrics_hook)
        image_encoder = await load_image_encoder(
            self._encoder_config(self.config.image_model_for(model)), self.metrics_hook
        )

        text_embeddings: list[Embedding] = []
        image_embeddings: list[Embedding] = []
        for sample in sample_set.samples:
            if sample.image_url is None:
                raise ValueError(
                    f"Sample set '{sample_set.name}' has a sample without image_url"
                )
            image = await self._image_loader.fetch(sample.image_url)
            text_embeddings.append(await text_encoder.encode(sample.text))
            image_embeddings.append(await image_encoder.encode(image))

        return cross_modal_expectations(text_embeddings, image_embeddings)

    async def verify_model(self, model: str) -> ModelReport:
        """Run the text and image checks for one model.

        Ordering violations are recorded in the report. Load and fetch
        errors propagate.
        """
        start = monotonic()
        logger.info("Verifying model %s", model)
        report = ModelReport(model=model)

        self._record(report, "text", await self.verify_text_embeddings(model))
        self._record(report, "image", await self.verify_image_embeddings(model))

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.VERIFICATION_DURATION, elapsed_ms, labels={"model": model}
        )
        logger.info(
            "Model %s: %s (%d violations)",
            model,
            "passed" if report.passed else "failed",
            len(report.violations),
        )
        return report

    async def verify_models(self) -> list[ModelReport]:
        """Verify every configured model, strictly one at a time.

        With ``fail_fast`` the first load or fetch error is re-raised and
        the remaining models are skipped. Otherwise the error is stored on
        that model's report and the run continues.
        """
        reports: list[ModelReport] = []
        for model in self.config.models:
            try:
                reports.append(await self.verify_model(model))
            except DimensionMismatchError:
                raise
            except Exception as e:
                self.metrics_hook.increment(
                    names.VERIFICATION_ERRORS_TOTAL, labels={"model": model}
                )
                logger.error("Verification of %s failed: %s", model, e)
                if self.config.fail_fast:
                    raise
                reports.append(ModelReport(model=model, error=f"{type(e).__name__}: {e}"))
        return reports

    def _record(
        self, report: ModelReport, check: str, expectations: list[Expectation]
    ) -> None:
        violations = evaluate(expectations)
        report.checks.append(check)
        report.violations.extend(violations)

        labels = {"model": report.model, "check": check}
        self.metrics_hook.increment(
            names.VERIFICATION_CHECKS_TOTAL, len(expectations), labels=labels
        )
        if violations:
            self.metrics_hook.increment(
                names.VERIFICATION_VIOLATIONS_TOTAL, len(violations), labels=labels
            )
        for v in violations:
            logger.warning("%s [%s]: %s", report.model, check, v.label)

    def _encoder_config(self, model: str) -> EncoderConfig:
        return EncoderConfig(
            model=model,
            token=self.config.token,
            device=self.config.device,
            cache_folder=self.config.cache_folder,
            normalize=self.config.normalize,
        )

    async def aclose(self) -> None:
        if self._owns_loader:
            await self._image_loader.aclose()

    async def __aenter__(self) -> EmbeddingSimilarityVerifier:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
